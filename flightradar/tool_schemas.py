"""MCP tool descriptors advertised by tools/list."""

from mcp import types

GET_FLIGHT_DATA = "get_flight_data"
SEARCH_FLIGHTS = "search_flights"
GET_FLIGHT_STATUS = "get_flight_status"

_FLIGHT_CODE_PROPERTIES = {
    "flight_iata": {
        "type": "string",
        "description": "IATA flight code (e.g., 'BA123')",
    },
    "flight_icao": {
        "type": "string",
        "description": "ICAO flight code (e.g., 'BAW123')",
    },
}

_ONE_FLIGHT_CODE = [
    {"required": ["flight_iata"]},
    {"required": ["flight_icao"]},
]

TOOLS = (
    types.Tool(
        name=GET_FLIGHT_DATA,
        description="Get real-time data for a specific flight by flight number",
        inputSchema={
            "type": "object",
            "properties": dict(_FLIGHT_CODE_PROPERTIES),
            "oneOf": list(_ONE_FLIGHT_CODE),
        },
    ),
    types.Tool(
        name=SEARCH_FLIGHTS,
        description="Search for flights by various criteria",
        inputSchema={
            "type": "object",
            "properties": {
                "airline_iata": {
                    "type": "string",
                    "description": "IATA airline code (e.g., 'BA' for British Airways)",
                },
                "airline_icao": {
                    "type": "string",
                    "description": "ICAO airline code (e.g., 'BAW' for British Airways)",
                },
                "dep_iata": {
                    "type": "string",
                    "description": "IATA code of departure airport (e.g., 'LHR')",
                },
                "arr_iata": {
                    "type": "string",
                    "description": "IATA code of arrival airport (e.g., 'JFK')",
                },
                "flight_status": {
                    "type": "string",
                    "description": "Flight status (e.g., 'scheduled', 'active', 'landed', 'cancelled')",
                    "enum": ["scheduled", "active", "landed", "cancelled", "incident", "diverted"],
                },
                "limit": {
                    "type": "number",
                    "description": "Maximum number of results to return (default: 10, max: 100)",
                    "minimum": 1,
                    "maximum": 100,
                },
            },
        },
    ),
    types.Tool(
        name=GET_FLIGHT_STATUS,
        description="Get the current status of a flight by flight number",
        inputSchema={
            "type": "object",
            "properties": dict(_FLIGHT_CODE_PROPERTIES),
            "oneOf": list(_ONE_FLIGHT_CODE),
        },
    ),
)

"""Tool Router: one validated tool call -> one AviationStack request -> one result."""

import json
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

import httpx
from mcp import types
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

from flightradar.aviationstack.client import AviationStackClient, upstream_error_message
from flightradar.aviationstack.transform import to_flight_detail, to_search_result
from flightradar.formatters.status import format_flight_status
from flightradar.obs.logger import log_event
from flightradar.obs.middleware import observe_tool_call
from flightradar.tool_schemas import GET_FLIGHT_DATA, GET_FLIGHT_STATUS, SEARCH_FLIGHTS, TOOLS
from flightradar.types import FlightLookupArgs, SearchFlightsArgs, ToolArgs

MISSING_API_KEY_MESSAGE = (
    "Error: AviationStack API key is not configured. "
    "Please set the AVIATIONSTACK_API_KEY environment variable."
)
NO_FLIGHT_DATA_MESSAGE = "No flight data found for the specified flight number."
NO_FLIGHTS_FOUND_MESSAGE = "No flights found matching the search criteria."
NO_FLIGHT_STATUS_MESSAGE = "No flight status found for the specified flight number."


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def _describe_validation_error(exc: ValidationError) -> str:
    messages = []
    for err in exc.errors():
        cause = (err.get("ctx") or {}).get("error")
        if err.get("type") == "value_error" and cause is not None:
            messages.append(str(cause))
        else:
            field = ".".join(str(p) for p in err.get("loc", ())) or "arguments"
            messages.append(f"{field}: {err.get('msg')}")
    return "; ".join(messages)


def parse_arguments(model: Type[ToolArgs], arguments: Optional[Dict[str, Any]]) -> ToolArgs:
    """Validate raw tool arguments, raising INVALID_PARAMS before any I/O."""
    try:
        return model.model_validate(arguments or {})
    except ValidationError as e:
        raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=_describe_validation_error(e)))


class ToolRouter:
    """Maps each tool call onto exactly one upstream request.

    Transport failures come back as soft error results so the MCP session
    stays alive; validation problems and unknown tools raise ``McpError``;
    anything else propagates to the caller untouched.
    """

    def __init__(self, client: AviationStackClient, tz: str = "UTC"):
        self.client = client
        self.tz = tz
        self._handlers: Dict[str, Callable[[Optional[Dict[str, Any]]], Awaitable[types.CallToolResult]]] = {
            GET_FLIGHT_DATA: self._get_flight_data,
            SEARCH_FLIGHTS: self._search_flights,
            GET_FLIGHT_STATUS: self._get_flight_status,
        }

    def list_tools(self) -> List[types.Tool]:
        return list(TOOLS)

    @observe_tool_call
    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> types.CallToolResult:
        if not self.client.configured:
            return text_result(MISSING_API_KEY_MESSAGE, is_error=True)

        handler = self._handlers.get(name)
        if handler is None:
            raise McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}"))

        try:
            return await handler(arguments)
        except (httpx.HTTPStatusError, httpx.RequestError) as e:
            message = upstream_error_message(e)
            log_event("upstream_error", level="WARNING", error_type=type(e).__name__, message=message)
            return text_result(f"API Error: {message}", is_error=True)

    async def _get_flight_data(self, arguments):
        args = parse_arguments(FlightLookupArgs, arguments)
        payload = await self.client.get_flights(args.to_query())
        records = payload.get("data") or []
        if not records:
            return text_result(NO_FLIGHT_DATA_MESSAGE)
        return text_result(json.dumps(to_flight_detail(records[0]), indent=2, ensure_ascii=False))

    async def _search_flights(self, arguments):
        args = parse_arguments(SearchFlightsArgs, arguments)
        payload = await self.client.get_flights(args.to_query())
        if not payload.get("data"):
            return text_result(NO_FLIGHTS_FOUND_MESSAGE)
        return text_result(json.dumps(to_search_result(payload), indent=2, ensure_ascii=False))

    async def _get_flight_status(self, arguments):
        args = parse_arguments(FlightLookupArgs, arguments)
        payload = await self.client.get_flights(args.to_query())
        records = payload.get("data") or []
        if not records:
            return text_result(NO_FLIGHT_STATUS_MESSAGE)
        return text_result(format_flight_status(records[0], tz=self.tz))

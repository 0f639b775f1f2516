"""FlightRadar MCP server: AviationStack flight lookups exposed as MCP tools."""

__version__ = "0.1.0"

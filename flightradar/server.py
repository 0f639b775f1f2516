"""MCP stdio wiring around the Tool Router."""

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from flightradar import __version__
from flightradar.router import ToolRouter

SERVER_NAME = "flightradar-mcp-server"


def build_server(router: ToolRouter) -> Server:
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return router.list_tools()

    # Registered directly rather than through @server.call_tool(): that
    # decorator turns every exception into an isError result, while an
    # McpError raised here must reach the client as a JSON-RPC error.
    # The router also validates arguments itself, since the advertised
    # oneOf would reject calls that carry both flight codes.
    async def handle_call_tool(req: types.CallToolRequest) -> types.ServerResult:
        result = await router.call_tool(req.params.name, req.params.arguments or {})
        return types.ServerResult(result)

    server.request_handlers[types.CallToolRequest] = handle_call_tool
    return server


async def serve(router: ToolRouter) -> None:
    server = build_server(router)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())

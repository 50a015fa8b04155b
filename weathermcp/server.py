from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List
import httpx
import mcp.types as types
from mcp.server import Server
from .nws import NWSClient, NWS_API_BASE, USER_AGENT
from .tools import WeatherTools

SERVER_NAME = "weather"
SERVER_VERSION = "1.0.0"


def create_server(
    *,
    base_url: str = NWS_API_BASE,
    user_agent: str = USER_AGENT,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport = None,
    debug: bool = False
) -> Server:
    """
    Build a new weather MCP server.

    Called once per HTTP request: nothing is shared between the servers it
    returns. The NWS client lives as long as the server runs.
    """

    @asynccontextmanager
    async def lifespan(server: Server) -> AsyncIterator[WeatherTools]:
        nws_client = NWSClient(
            base_url=base_url,
            user_agent=user_agent,
            timeout=timeout,
            transport=transport,
            debug=debug
        )
        try:
            yield WeatherTools(nws_client=nws_client, debug=debug)
        finally:
            await nws_client.close()

    server = Server(SERVER_NAME, version=SERVER_VERSION, lifespan=lifespan)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return WeatherTools.tool_specs()

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        weather_tools: WeatherTools = server.request_context.lifespan_context
        text = await weather_tools.call_tool(name, arguments)
        return [types.TextContent(type="text", text=text)]

    return server

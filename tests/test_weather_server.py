import httpx
import pytest
from mcp.shared.memory import create_connected_server_and_client_session
from weathermcp.server import create_server, SERVER_NAME, SERVER_VERSION

NWS_BASE = "https://api.weather.test"


def test_create_server():
    server = create_server()
    assert server.name == SERVER_NAME == "weather"
    assert server.version == SERVER_VERSION == "1.0.0"
    assert create_server() is not server


@pytest.mark.asyncio
async def test_call_tools_in_memory():
    urls = []

    def handler(request: httpx.Request):
        urls.append(str(request.url))
        return httpx.Response(200, json={"features": []})

    server = create_server(base_url=NWS_BASE, transport=httpx.MockTransport(handler))

    async with create_connected_server_and_client_session(server) as client:
        tools = await client.list_tools()
        assert [t.name for t in tools.tools] == ["get_alerts", "get_forecast"]

        result = await client.call_tool("get_alerts", {"state": "ks"})
        assert result.isError is False
        assert result.content[0].text == "No active alerts for KS"

        result = await client.call_tool("get_forecast", {"latitude": 120, "longitude": 0})
        assert result.isError is True

    assert urls == [f"{NWS_BASE}/alerts?area=KS"]

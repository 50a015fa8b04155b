import pytest
from weathermcp.adapter.http import StatelessMCPSession
from weathermcp.server import create_server


def test_session_binds_stateless_transport():
    server = create_server()
    session = StatelessMCPSession(server, json_response=True)

    assert session.server is server
    assert session.transport.mcp_session_id is None
    assert session.is_closed is False


def test_sessions_are_independent():
    session1 = StatelessMCPSession(create_server())
    session2 = StatelessMCPSession(create_server())

    assert session1.server is not session2.server
    assert session1.transport is not session2.transport


@pytest.mark.asyncio
async def test_close_twice():
    session = StatelessMCPSession(create_server())

    await session.close()
    assert session.is_closed is True

    # Closing again must not fail
    await session.close()
    assert session.is_closed is True


@pytest.mark.asyncio
async def test_closed_session_rejects_request():
    session = StatelessMCPSession(create_server())
    await session.close()

    async def receive():
        return {"type": "http.request", "body": b"", "more_body": False}

    async def send(message):
        pass

    with pytest.raises(RuntimeError):
        await session.handle_request({"type": "http", "method": "POST", "path": "/mcp", "headers": []}, receive, send)

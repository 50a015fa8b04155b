import logging
import anyio
from mcp.server import Server
from mcp.server.streamable_http import StreamableHTTPServerTransport
from starlette.types import Receive, Scope, Send

logger = logging.getLogger(__name__)


class StatelessMCPSession:
    """
    One MCP server bound to one streamable HTTP transport for a single request.

    No session id is issued, so the pair can never be looked up again: it is
    created for the request, serves exactly one request/response cycle and is
    closed when the response has been sent.
    """

    def __init__(self, server: Server, *, json_response: bool = False, debug: bool = False):
        self.server = server
        self.transport = StreamableHTTPServerTransport(
            mcp_session_id=None,
            is_json_response_enabled=json_response
        )
        self.is_closed = False
        self.debug = debug

    async def _run_server(self, *, task_status=anyio.TASK_STATUS_IGNORED):
        async with self.transport.connect() as (read_stream, write_stream):
            task_status.started()
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
                stateless=True
            )

    async def handle_request(self, scope: Scope, receive: Receive, send: Send):
        if self.is_closed:
            raise RuntimeError("Session is already closed")

        if self.debug:
            logger.info(f"MCP request: {scope.get('method')} {scope.get('path')}")

        # Server task ends by itself once the transport is terminated
        async with anyio.create_task_group() as tg:
            try:
                await tg.start(self._run_server)
                await self.transport.handle_request(scope, receive, send)
            finally:
                await self.close()

    async def close(self):
        if self.is_closed:
            return
        self.is_closed = True

        await self.transport.terminate()
        logger.info("Request closed")

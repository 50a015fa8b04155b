import logging
from contextlib import AbstractAsyncContextManager
from functools import partial
from typing import Callable, Optional
import httpx
from fastapi import APIRouter, FastAPI
from fastapi.responses import JSONResponse
from mcp.server import Server
from starlette.types import Message, Receive, Scope, Send
from ...nws import NWS_API_BASE, USER_AGENT
from ...server import create_server
from .session import StatelessMCPSession

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED_ERROR = {
    "jsonrpc": "2.0",
    "error": {
        "code": -32000,
        "message": "Method not allowed."
    },
    "id": None
}

INTERNAL_SERVER_ERROR = {
    "jsonrpc": "2.0",
    "error": {
        "code": -32603,
        "message": "Internal server error"
    },
    "id": None
}


class StatelessMCPEndpoint:
    """ASGI endpoint that serves each MCP POST with a brand-new session."""

    def __init__(self, server_factory: Callable[[], Server], *, json_response: bool = False, debug: bool = False):
        self.server_factory = server_factory
        self.json_response = json_response
        self.debug = debug

    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        response_started = False

        async def send_with_state(message: Message):
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            session = StatelessMCPSession(
                self.server_factory(),
                json_response=self.json_response,
                debug=self.debug
            )
            await session.handle_request(scope, receive, send_with_state)

        except Exception as ex:
            logger.error(f"Error handling MCP request: {ex}", exc_info=True)
            if not response_started:
                response = JSONResponse(status_code=500, content=INTERNAL_SERVER_ERROR)
                await response(scope, receive, send)


class WeatherMCPHttpServer:
    def __init__(
        self,
        *,
        # NWS API
        nws_api_base: str = NWS_API_BASE,
        nws_user_agent: str = USER_AGENT,
        nws_timeout: float = 30.0,
        nws_transport: httpx.AsyncBaseTransport = None,

        # MCP server
        server_factory: Callable[[], Server] = None,
        json_response: bool = False,

        # Debug
        debug: bool = False
    ):
        self.server_factory = server_factory or partial(
            create_server,
            base_url=nws_api_base,
            user_agent=nws_user_agent,
            timeout=nws_timeout,
            transport=nws_transport,
            debug=debug
        )
        self.json_response = json_response
        self.debug = debug

    def get_api_router(self, path: str = "/mcp") -> APIRouter:
        router = APIRouter()

        router.add_route(
            path,
            StatelessMCPEndpoint(self.server_factory, json_response=self.json_response, debug=self.debug),
            methods=["POST"],
            name="mcp"
        )

        # Stateless: there is no SSE stream to resume and no session to delete
        @router.get(path)
        async def get_mcp():
            logger.info("Received GET MCP request")
            return JSONResponse(status_code=405, content=METHOD_NOT_ALLOWED_ERROR)

        @router.delete(path)
        async def delete_mcp():
            logger.info("Received DELETE MCP request")
            return JSONResponse(status_code=405, content=METHOD_NOT_ALLOWED_ERROR)

        return router

    def create_app(
        self,
        path: str = "/mcp",
        lifespan: Optional[Callable[[FastAPI], AbstractAsyncContextManager]] = None
    ) -> FastAPI:
        app = FastAPI(lifespan=lifespan)
        app.include_router(self.get_api_router(path))
        return app

import logging
import os
import sys
from contextlib import asynccontextmanager
import uvicorn
from fastapi import FastAPI
from .nws import NWS_API_BASE, USER_AGENT
from .adapter.http import WeatherMCPHttpServer

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def configure_logging(level: str = "INFO"):
    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    log_format = logging.Formatter("[%(levelname)s] %(asctime)s : %(message)s")
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(log_format)
    root_logger.addHandler(stream_handler)


def main() -> int:
    configure_logging(os.environ.get("WEATHER_MCP_LOG_LEVEL", "INFO"))

    host = os.environ.get("WEATHER_MCP_HOST", "0.0.0.0")
    path = os.environ.get("WEATHER_MCP_PATH", "/mcp")
    try:
        port = int(os.environ.get("WEATHER_MCP_PORT", "3000"))
        nws_timeout = float(os.environ.get("NWS_TIMEOUT", "30.0"))
    except ValueError as vex:
        logger.error(f"Failed to start server: invalid configuration: {vex}")
        return 1

    mcp_server = WeatherMCPHttpServer(
        nws_api_base=os.environ.get("NWS_API_BASE", NWS_API_BASE),
        nws_user_agent=os.environ.get("NWS_USER_AGENT", USER_AGENT),
        nws_timeout=nws_timeout,
        json_response=_env_flag("WEATHER_MCP_JSON_RESPONSE"),
        debug=_env_flag("WEATHER_MCP_DEBUG")
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"MCP Stateless Streamable HTTP Server listening on port {port}")
        yield
        logger.info("Shutting down server...")

    app = mcp_server.create_app(path=path, lifespan=lifespan)
    server = uvicorn.Server(uvicorn.Config(app, host=host, port=port, log_level=os.environ.get("WEATHER_MCP_LOG_LEVEL", "INFO").lower()))

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Shutting down server...")
        return 0

    if not server.started:
        logger.error("Failed to start server")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

# pip install weathermcp
import logging
import os
from fastapi import FastAPI
from weathermcp import WeatherMCPHttpServer

# Configure root logger
logger = logging.getLogger()
logger.setLevel(logging.INFO)
log_format = logging.Formatter("[%(levelname)s] %(asctime)s : %(message)s")
streamHandler = logging.StreamHandler()
streamHandler.setFormatter(log_format)
logger.addHandler(streamHandler)

# Configuration
NWS_USER_AGENT = os.environ.get("NWS_USER_AGENT", "weather-app/1.0")

# Create MCP server
mcp_server = WeatherMCPHttpServer(
    nws_user_agent=NWS_USER_AGENT,
    json_response=True,
    debug=True
)

# FastAPI app
app = FastAPI()
app.include_router(mcp_server.get_api_router("/mcp"))

# Run `uvicorn server:app --port 3000` and connect your MCP client to http://localhost:3000/mcp

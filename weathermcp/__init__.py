import logging
from .nws import NWSClient
from .tools import WeatherTools, ToolInputError
from .server import create_server
from .adapter.http import WeatherMCPHttpServer, StatelessMCPSession

logger = logging.getLogger(__name__)

from .session import StatelessMCPSession
from .server import WeatherMCPHttpServer, StatelessMCPEndpoint

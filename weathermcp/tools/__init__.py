from .models import AlertsRequest, ForecastRequest
from .weather import WeatherTools, ToolInputError, format_coordinate

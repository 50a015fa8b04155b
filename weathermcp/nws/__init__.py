from .client import NWSClient, NWS_API_BASE, USER_AGENT
from .models import AlertRecord, ForecastPeriod
from .formatter import format_alert, format_forecast_period, format_number

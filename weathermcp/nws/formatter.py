from typing import Any, Union
from .models import AlertRecord, ForecastPeriod


def _or(value: Any, placeholder: str) -> Any:
    # Absent, null and empty string all count as missing; 0 does not
    if value is None or value == "":
        return placeholder
    return value


def format_number(value: Union[int, float]) -> str:
    """Render a number the way it reads in text: 72.0 -> '72', 37.7749 -> '37.7749'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_alert(alert: AlertRecord) -> str:
    return "\n".join([
        f"Event: {_or(alert.event, 'Unknown')}",
        f"Area: {_or(alert.areaDesc, 'Unknown')}",
        f"Severity: {_or(alert.severity, 'Unknown')}",
        f"Status: {_or(alert.status, 'Unknown')}",
        f"Headline: {_or(alert.headline, 'No headline')}",
        "---",
    ])


def format_forecast_period(period: ForecastPeriod) -> str:
    temperature = "Unknown" if period.temperature is None else format_number(period.temperature)
    return "\n".join([
        f"{_or(period.name, 'Unknown')}:",
        f"Temperature: {temperature}°{_or(period.temperatureUnit, 'F')}",
        f"Wind: {_or(period.windSpeed, 'Unknown')} {_or(period.windDirection, '')}",
        f"{_or(period.shortForecast, 'No forecast available')}",
        "---",
    ])

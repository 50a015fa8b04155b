from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, field_validator


def _to_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class AlertRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    event: Optional[str] = None
    areaDesc: Optional[str] = None
    severity: Optional[str] = None
    status: Optional[str] = None
    headline: Optional[str] = None

    @field_validator("event", "areaDesc", "severity", "status", "headline", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        return _to_text(value)


class ForecastPeriod(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    temperature: Optional[float] = None
    temperatureUnit: Optional[str] = None
    windSpeed: Optional[str] = None
    windDirection: Optional[str] = None
    shortForecast: Optional[str] = None

    @field_validator("name", "temperatureUnit", "windSpeed", "windDirection", "shortForecast", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        return _to_text(value)

    @field_validator("temperature", mode="before")
    @classmethod
    def coerce_temperature(cls, value: Any) -> Optional[float]:
        # Quantitative value: {"unitCode": "wmoUnit:degC", "value": 20}
        if isinstance(value, dict):
            value = value.get("value")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value
        return None

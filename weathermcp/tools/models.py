from pydantic import BaseModel, ConfigDict, Field


class AlertsRequest(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    state: str = Field(
        ...,
        min_length=2,
        max_length=2,
        description="Two-letter state code (e.g. CA, NY)"
    )


class ForecastRequest(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    latitude: float = Field(
        ...,
        ge=-90,
        le=90,
        description="Latitude of the location"
    )
    longitude: float = Field(
        ...,
        ge=-180,
        le=180,
        description="Longitude of the location"
    )

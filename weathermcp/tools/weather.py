import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError
import mcp.types as types
from ..nws import NWSClient, AlertRecord, ForecastPeriod, format_alert, format_forecast_period, format_number
from .models import AlertsRequest, ForecastRequest

logger = logging.getLogger(__name__)

RequestModel = TypeVar("RequestModel", bound=BaseModel)


class ToolInputError(ValueError):
    pass


def format_coordinate(value: float) -> str:
    # 4 decimal places, rounding half away from zero on the exact binary value
    # -0.0 prints unsigned, -0.00001 keeps its sign
    quantized = Decimal(value if value != 0 else 0).quantize(Decimal("0.0001"), rounding=ROUND_HALF_UP)
    return format(quantized, "f")


def _object(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _records(value: Any) -> List[Dict[str, Any]]:
    # Non-object entries are skipped
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, dict)]


class WeatherTools:
    """
    The `get_alerts` and `get_forecast` tools.

    Every upstream failure is turned into a reply sentence; only invalid input
    raises (ToolInputError), and it does so before any request is sent.
    """

    def __init__(self, *, nws_client: NWSClient, debug: bool = False):
        self.nws_client = nws_client
        self.debug = debug

    @staticmethod
    def tool_specs() -> List[types.Tool]:
        return [
            types.Tool(
                name="get_alerts",
                description="Get weather alerts for a state",
                inputSchema=AlertsRequest.model_json_schema()
            ),
            types.Tool(
                name="get_forecast",
                description="Get weather forecast for a location",
                inputSchema=ForecastRequest.model_json_schema()
            ),
        ]

    def validate(self, model: Type[RequestModel], name: str, arguments: Optional[Dict[str, Any]]) -> RequestModel:
        try:
            return model.model_validate(arguments or {})
        except ValidationError as vex:
            logger.warning(f"Invalid arguments for {name}: {arguments}")
            raise ToolInputError(f"Invalid arguments for tool {name}: {vex}") from vex

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> str:
        if self.debug:
            logger.info(f"Tool call: {name}({arguments})")

        if name == "get_alerts":
            request = self.validate(AlertsRequest, name, arguments)
            return await self._get_alerts(request)

        elif name == "get_forecast":
            request = self.validate(ForecastRequest, name, arguments)
            return await self._get_forecast(request)

        raise ValueError(f"Unknown tool: {name}")

    async def get_alerts(self, state: str) -> str:
        return await self.call_tool("get_alerts", {"state": state})

    async def get_forecast(self, latitude: float, longitude: float) -> str:
        return await self.call_tool("get_forecast", {"latitude": latitude, "longitude": longitude})

    async def _get_alerts(self, request: AlertsRequest) -> str:
        state_code = request.state.upper()
        alerts_data = await self.nws_client.fetch(f"{self.nws_client.base_url}/alerts?area={state_code}")

        if alerts_data is None:
            return "Failed to retrieve alerts data"

        features = _records(alerts_data.get("features"))
        if not features:
            return f"No active alerts for {state_code}"

        formatted_alerts = [
            format_alert(AlertRecord.model_validate(_object(f.get("properties"))))
            for f in features
        ]
        return f"Active alerts for {state_code}:\n\n" + "\n".join(formatted_alerts)

    async def _get_forecast(self, request: ForecastRequest) -> str:
        latitude = format_number(request.latitude)
        longitude = format_number(request.longitude)

        # Grid point lookup
        points_url = f"{self.nws_client.base_url}/points/{format_coordinate(request.latitude)},{format_coordinate(request.longitude)}"
        points_data = await self.nws_client.fetch(points_url)

        if points_data is None:
            return (
                f"Failed to retrieve grid point data for coordinates: {latitude}, {longitude}. "
                "This location may not be supported by the NWS API (only US locations are supported)."
            )

        forecast_url = _object(points_data.get("properties")).get("forecast")
        if not forecast_url or not isinstance(forecast_url, str):
            return "Failed to get forecast URL from grid point data"

        forecast_data = await self.nws_client.fetch(forecast_url)
        if forecast_data is None:
            return "Failed to retrieve forecast data"

        periods = _records(_object(forecast_data.get("properties")).get("periods"))
        if not periods:
            return "No forecast periods available"

        formatted_forecast = [format_forecast_period(ForecastPeriod.model_validate(p)) for p in periods]
        return f"Forecast for {latitude}, {longitude}:\n\n" + "\n".join(formatted_forecast)

import logging
from typing import Any, Dict, Optional
import httpx

logger = logging.getLogger(__name__)

NWS_API_BASE = "https://api.weather.gov"
USER_AGENT = "weather-app/1.0"


class NWSClient:
    """
    Thin client for the National Weather Service API.

    `fetch` never raises: any network failure, non-success status or unparsable
    body is logged and reported to the caller as None.
    """

    def __init__(
        self,
        *,
        base_url: str = NWS_API_BASE,
        user_agent: str = USER_AGENT,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport = None,
        debug: bool = False
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.http_client = httpx.AsyncClient(
            follow_redirects=True,
            timeout=httpx.Timeout(timeout),
            transport=transport
        )
        self.debug = debug

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/geo+json"
        }

    async def fetch(self, url: str) -> Optional[Dict[str, Any]]:
        if self.debug:
            logger.info(f"NWS request: {url}")

        try:
            response = await self.http_client.get(url, headers=self.headers)
            response.raise_for_status()
            data = response.json()

        except httpx.TimeoutException as tex:
            logger.error(f"Error making NWS request: timeout ({url}): {tex}")
            return None

        except httpx.HTTPStatusError as hsex:
            logger.error(f"Error making NWS request: HTTP error! status: {hsex.response.status_code} ({url})")
            return None

        except (httpx.HTTPError, httpx.InvalidURL) as ex:
            logger.error(f"Error making NWS request: {ex.__class__.__name__} ({url}): {ex}")
            return None

        except ValueError as vex:
            logger.error(f"Error making NWS request: invalid JSON ({url}): {vex}")
            return None

        if not isinstance(data, dict):
            logger.error(f"Error making NWS request: unexpected payload type {type(data).__name__} ({url})")
            return None

        if self.debug:
            logger.info(f"NWS response: {url} ({response.status_code})")

        return data

    async def close(self):
        await self.http_client.aclose()

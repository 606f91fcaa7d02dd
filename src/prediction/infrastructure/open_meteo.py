"""Open-Meteo forecast API client."""

from typing import Any, Dict, Optional

import httpx

from ...common.logging import setup_logger
from ...common.exceptions import WeatherProviderError

logger = setup_logger(__name__)

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
WEATHER_FIELDS = ("temperature_2m", "precipitation", "rain", "wind_speed_10m")


class OpenMeteoClient:
    """Thin async wrapper around the two forecast endpoint variants."""

    def __init__(
        self,
        base_url: str = OPEN_METEO_URL,
        timezone: str = "America/Chicago",
        timeout: float = 5.0,
        forecast_days: int = 8,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url
        self.timezone = timezone
        self.forecast_days = forecast_days
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_current(self, lat: float, lon: float) -> Dict[str, Any]:
        """Return the ``current`` block: one value per weather field."""
        params = self._base_params(lat, lon)
        params["current"] = ",".join(WEATHER_FIELDS)
        payload = await self._get(params)
        return self._block(payload, "current")

    async def fetch_hourly(self, lat: float, lon: float) -> Dict[str, Any]:
        """Return the ``hourly`` block: one array per weather field, from local midnight today."""
        params = self._base_params(lat, lon)
        params["hourly"] = ",".join(WEATHER_FIELDS)
        params["forecast_days"] = self.forecast_days
        payload = await self._get(params)
        return self._block(payload, "hourly")

    async def close(self):
        await self._client.aclose()

    def _base_params(self, lat: float, lon: float) -> Dict[str, Any]:
        return {
            "latitude": lat,
            "longitude": lon,
            "timezone": self.timezone,
        }

    async def _get(self, params: Dict[str, Any]) -> Any:
        try:
            logger.debug("Fetching Open-Meteo weather: %s", params)
            response = await self._client.get(self.base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise WeatherProviderError(
                f"Weather API error: {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise WeatherProviderError(f"Weather API request failed: {exc!r}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise WeatherProviderError("Weather API returned malformed JSON") from exc

    @staticmethod
    def _block(payload: Any, name: str) -> Dict[str, Any]:
        block = payload.get(name) if isinstance(payload, dict) else None
        if not isinstance(block, dict):
            raise WeatherProviderError(f"Weather API payload has no '{name}' block")
        return block

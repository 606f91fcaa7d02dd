"""Weather resolution with a forecast -> current -> defaults degradation ladder."""

from typing import Any, Mapping, Optional

from ...common.exceptions import WeatherProviderError
from ...common.logging import setup_logger
from ...common.metrics import MetricsCollector
from ..domain import WeatherReading
from .cache import WeatherCache
from .open_meteo import OpenMeteoClient, WEATHER_FIELDS

logger = setup_logger(__name__)

DEFAULT_WEATHER = WeatherReading(
    temperature_2m=20.0,
    precipitation=0.0,
    rain=0.0,
    wind_speed_10m=10.0,
)

HOURS_PER_DAY = 24


class OpenMeteoWeatherProvider:
    """
    Resolves a WeatherReading for a location and target time. Never raises.

    Tiers, each callable on its own:
      forecast() -- hourly forecast row at ``day_offset * 24 + hour``
      current()  -- current conditions snapshot
      defaults() -- fixed fallback reading
    """

    def __init__(
        self,
        client: OpenMeteoClient,
        cache: Optional[WeatherCache] = None,
        defaults: WeatherReading = DEFAULT_WEATHER,
        current_ttl: float = 300,
        forecast_ttl: float = 3600,
        metrics: Optional[MetricsCollector] = None,
    ):
        self.client = client
        self.cache = cache
        self._defaults = defaults
        self.current_ttl = current_ttl
        self.forecast_ttl = forecast_ttl
        self.metrics = metrics

    async def fetch_weather(self, lat: float, lon: float, hour: int, day_offset: int) -> WeatherReading:
        if day_offset == 0:
            return await self.current(lat, lon)
        return await self.forecast(lat, lon, hour, day_offset)

    def defaults(self) -> WeatherReading:
        return self._defaults

    async def current(self, lat: float, lon: float) -> WeatherReading:
        try:
            block = await self._cached("current", lat, lon, self.current_ttl, self.client.fetch_current)
            return self._reading(lambda name: block.get(name))
        except (WeatherProviderError, ValueError, TypeError) as exc:
            logger.warning("Failed to fetch weather, using defaults: %s", exc)
            self._record_fallback()
            return self.defaults()

    async def forecast(self, lat: float, lon: float, hour: int, day_offset: int) -> WeatherReading:
        index = day_offset * HOURS_PER_DAY + hour
        try:
            hourly = await self._cached("hourly", lat, lon, self.forecast_ttl, self.client.fetch_hourly)
            axis = hourly.get("temperature_2m")
            if not isinstance(axis, list) or not 0 <= index < len(axis):
                logger.warning(
                    "Forecast index %d out of range, falling back to current weather", index
                )
                self._record_fallback()
                return await self.current(lat, lon)
            return self._reading(lambda name: _at(hourly.get(name), index))
        except (WeatherProviderError, ValueError, TypeError) as exc:
            logger.warning("Failed to fetch forecast, falling back to current weather: %s", exc)
            self._record_fallback()
            return await self.current(lat, lon)

    async def _cached(self, variant: str, lat: float, lon: float, ttl: float, fetch) -> Mapping[str, Any]:
        if self.cache is None:
            return await fetch(lat, lon)
        return await self.cache.get_or_fetch(variant, lat, lon, ttl, lambda: fetch(lat, lon))

    def _reading(self, value_of) -> WeatherReading:
        values = {}
        for name in WEATHER_FIELDS:
            value = value_of(name)
            values[name] = float(value) if value is not None else getattr(self._defaults, name)
        return WeatherReading(**values)

    def _record_fallback(self):
        if self.metrics is not None:
            self.metrics.record_fallback()


def _at(values: Any, index: int) -> Any:
    if isinstance(values, list) and 0 <= index < len(values):
        return values[index]
    return None

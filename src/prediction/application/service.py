"""
Prediction request orchestration.
"""
import time
from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from ..domain import (
    Location, BatchResponse, CongestionLevel, CongestionSummary, WeatherSource
)
from ..infrastructure.locations import network_center
from .predictor import BatchPredictor
from .time_resolver import TimeResolver, normalize_hour, normalize_day
from ...common.logging import setup_logger, log_execution_time
from ...common.metrics import MetricsCollector

logger = setup_logger(__name__)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class PredictionService:
    """
    Resolves time, fetches weather once at the network center
    and predicts congestion for every configured location.
    """

    def __init__(
        self,
        locations: Sequence[Location],
        resolver: TimeResolver,
        weather_source: WeatherSource,
        predictor: BatchPredictor,
        metrics: Optional[MetricsCollector] = None,
        timestamp_fn: Callable[[], str] = utc_timestamp,
    ):
        self.locations = tuple(locations)
        self.resolver = resolver
        self.weather_source = weather_source
        self.predictor = predictor
        self.metrics = metrics or MetricsCollector()
        self.timestamp_fn = timestamp_fn
        self.center = network_center(self.locations)

    @log_execution_time(logger)
    async def predict(self, hour: Optional[int] = None, day: Optional[int] = None) -> BatchResponse:
        start = time.perf_counter()
        current_hour, current_day = self.resolver.now()
        hour = normalize_hour(current_hour if hour is None else hour)
        day = normalize_day(current_day if day is None else day)

        resolution = self.resolver.resolve(hour, day)
        lat, lon = self.center
        weather = await self.weather_source.fetch_weather(lat, lon, hour, resolution.day_offset)

        predictions = self.predictor.predict_all(self.locations, hour, day, weather)
        self.metrics.record_prediction((time.perf_counter() - start) * 1000)
        logger.info(
            f"Predicted {len(predictions)} locations for hour={hour} day={day} "
            f"(offset={resolution.day_offset}, weather={weather.condition})"
        )

        return BatchResponse(
            predictions=predictions,
            weather=weather,
            timestamp=self.timestamp_fn(),
            hour=hour,
            day=day,
        )

    @staticmethod
    def summarize(response: BatchResponse) -> CongestionSummary:
        counts = {level: 0 for level in CongestionLevel}
        for prediction in response.predictions:
            counts[prediction.level] += 1
        return CongestionSummary(total=len(response.predictions), counts=counts)

from dataclasses import dataclass
from typing import Dict, List
import time

@dataclass
class ServiceMetrics:
    """Prediction service metrics"""
    uptime_seconds: float
    requests_served: int
    avg_prediction_time_ms: float
    weather_cache_hits: int
    weather_cache_misses: int
    weather_fallbacks: int

    def to_dict(self) -> Dict:
        return {
            'uptime_seconds': round(self.uptime_seconds, 1),
            'requests_served': self.requests_served,
            'avg_prediction_time_ms': round(self.avg_prediction_time_ms, 2),
            'weather_cache_hits': self.weather_cache_hits,
            'weather_cache_misses': self.weather_cache_misses,
            'weather_fallbacks': self.weather_fallbacks
        }


class MetricsCollector:
    """Collects and aggregates service metrics"""

    def __init__(self):
        self.prediction_times: List[float] = []
        self.requests_served = 0
        self.cache_hits = 0
        self.cache_misses = 0
        self.fallbacks = 0
        self.start_time = time.time()

    def record_prediction(self, duration_ms: float):
        self.prediction_times.append(duration_ms)
        self.requests_served += 1
        # Keep buffer size manageable
        if len(self.prediction_times) > 1000:
            self.prediction_times.pop(0)

    def record_cache_hit(self):
        self.cache_hits += 1

    def record_cache_miss(self):
        self.cache_misses += 1

    def record_fallback(self):
        self.fallbacks += 1

    def get_metrics(self) -> ServiceMetrics:
        avg_pred = sum(self.prediction_times) / len(self.prediction_times) if self.prediction_times else 0.0

        return ServiceMetrics(
            uptime_seconds=time.time() - self.start_time,
            requests_served=self.requests_served,
            avg_prediction_time_ms=avg_pred,
            weather_cache_hits=self.cache_hits,
            weather_cache_misses=self.cache_misses,
            weather_fallbacks=self.fallbacks
        )

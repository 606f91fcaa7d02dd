"""
Domain protocols for the Congestion Prediction module.
"""
from datetime import datetime, tzinfo
from typing import Protocol, Sequence, Tuple
from .entities import WeatherReading, CongestionLevel

class RandomSource(Protocol):
    """
    Source of uniform draws in [0, 1).
    """
    def random(self) -> float:
        ...

class Clock(Protocol):
    """
    Wall-clock provider.
    """
    def now(self, tz: tzinfo) -> datetime:
        ...

class WeatherSource(Protocol):
    """
    Resolves a weather reading for coordinates and a target time.
    """
    async def fetch_weather(self, lat: float, lon: float, hour: int, day_offset: int) -> WeatherReading:
        ...

class CongestionClassifier(Protocol):
    """
    Maps a feature vector to a congestion level and confidence.
    """
    def classify(self, features: Sequence[float]) -> Tuple[CongestionLevel, float]:
        ...

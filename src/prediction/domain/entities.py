"""
Domain entities for the Congestion Prediction module.
"""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Dict
from pydantic import BaseModel, Field, ConfigDict

class CongestionLevel(IntEnum):
    """
    Ordinal congestion classification.
    """
    LOW = 0
    MODERATE = 1
    HIGH = 2

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

_LABELS = {
    CongestionLevel.LOW: "Low",
    CongestionLevel.MODERATE: "Moderate",
    CongestionLevel.HIGH: "High",
}

_COLORS = {
    CongestionLevel.LOW: "#22c55e",      # Green
    CongestionLevel.MODERATE: "#f59e0b", # Amber
    CongestionLevel.HIGH: "#ef4444",     # Red
}


class Location(BaseModel):
    """
    A fixed camera location in the monitored network.
    """
    name: str = Field(..., min_length=1, description="Unique location name")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")

    model_config = ConfigDict(frozen=True)


@dataclass(frozen=True)
class WeatherReading:
    """
    Weather conditions used as prediction context.
    """
    temperature_2m: float  # °C
    precipitation: float   # mm
    rain: float            # mm
    wind_speed_10m: float  # km/h

    @property
    def condition(self) -> str:
        """Human readable summary of the reading."""
        if self.rain > 0:
            return "Rainy"
        if self.precipitation > 0:
            return "Drizzle"
        if self.wind_speed_10m > 20:
            return "Windy"
        if self.temperature_2m < 0:
            return "Freezing"
        return "Clear Sky"

    def to_dict(self) -> Dict[str, float]:
        return {
            'temperature_2m': self.temperature_2m,
            'precipitation': self.precipitation,
            'rain': self.rain,
            'wind_speed_10m': self.wind_speed_10m
        }


@dataclass(frozen=True)
class TimeResolution:
    """
    Where a requested hour/day sits relative to now.
    """
    is_now: bool
    day_offset: int  # 0..6


@dataclass
class PredictionResult:
    """
    Congestion prediction for one location.
    """
    location: Location
    level: CongestionLevel
    confidence: float  # 0.0 to 1.0

    @property
    def label(self) -> str:
        return self.level.label


@dataclass
class BatchResponse:
    """
    Predictions for every configured location plus the shared context.
    """
    predictions: List[PredictionResult]
    weather: WeatherReading
    timestamp: str  # ISO-8601
    hour: int
    day: int


@dataclass
class CongestionSummary:
    """
    Per-level counts over a batch.
    """
    total: int
    counts: Dict[CongestionLevel, int] = field(default_factory=dict)

    def percentage(self, level: CongestionLevel) -> int:
        total = self.total or 1  # Avoid div by zero
        return round(self.counts.get(level, 0) / total * 100)

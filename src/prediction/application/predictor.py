"""
Batch congestion prediction over the configured camera locations.
"""
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..domain import (
    CongestionLevel, Location, WeatherReading, PredictionResult,
    RandomSource, CongestionClassifier
)

# Feature vector layout: [lat, lon, hour, day, temp, precip, rain, wind]
HOUR_FEATURE = 2


def build_features(location: Location, hour: int, day: int, weather: WeatherReading) -> List[float]:
    return [
        location.latitude,
        location.longitude,
        hour,
        day,
        weather.temperature_2m,
        weather.precipitation,
        weather.rain,
        weather.wind_speed_10m,
    ]


@dataclass(frozen=True)
class Thresholds:
    """Draws above ``high`` are High, above ``moderate`` Moderate, else Low."""
    high: float
    moderate: float

    def level_for(self, r: float) -> CongestionLevel:
        if r > self.high:
            return CongestionLevel.HIGH
        if r > self.moderate:
            return CongestionLevel.MODERATE
        return CongestionLevel.LOW


class HeuristicClassifier(CongestionClassifier):
    """
    Placeholder classifier: a random draw weighted towards congestion during peak hours.
    Not a traffic model; the windows and thresholds are demonstration values.
    """

    def __init__(
        self,
        random_source: Optional[RandomSource] = None,
        peak_windows: Sequence[Tuple[int, int]] = ((7, 9), (16, 18)),
        peak_thresholds: Thresholds = Thresholds(high=0.3, moderate=0.1),
        offpeak_thresholds: Thresholds = Thresholds(high=0.8, moderate=0.5),
        confidence_min: float = 0.5,
        confidence_span: float = 0.4,
    ):
        self.random_source = random_source or random.SystemRandom()
        self.peak_windows = [tuple(w) for w in peak_windows]
        self.peak_thresholds = peak_thresholds
        self.offpeak_thresholds = offpeak_thresholds
        self.confidence_min = confidence_min
        self.confidence_span = confidence_span

    def is_peak(self, hour: int) -> bool:
        return any(start <= hour <= end for start, end in self.peak_windows)

    def classify(self, features: Sequence[float]) -> Tuple[CongestionLevel, float]:
        hour = features[HOUR_FEATURE]
        thresholds = self.peak_thresholds if self.is_peak(hour) else self.offpeak_thresholds
        level = thresholds.level_for(self.random_source.random())
        confidence = self.confidence_min + self.random_source.random() * self.confidence_span
        return level, confidence


class BatchPredictor:
    """
    Produces one prediction per location, in input order.
    """

    def __init__(self, classifier: CongestionClassifier):
        self.classifier = classifier

    def predict_all(self, locations: Sequence[Location], hour: int, day: int,
                    weather: WeatherReading) -> List[PredictionResult]:
        results = []
        for location in locations:
            level, confidence = self.classifier.classify(build_features(location, hour, day, weather))
            results.append(PredictionResult(location=location, level=level, confidence=confidence))
        return results

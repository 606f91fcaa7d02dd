"""
Domain module initialization.
"""
from .entities import (
    CongestionLevel,
    Location,
    WeatherReading,
    TimeResolution,
    PredictionResult,
    BatchResponse,
    CongestionSummary
)
from .protocols import (
    RandomSource,
    Clock,
    WeatherSource,
    CongestionClassifier
)

from .camera import CameraLocation, CameraNetwork
from .prediction import (
    WeatherPayload, PredictionItem, BatchPredictionResponse,
    LevelBreakdown, PredictionSummary, ErrorResponse
)

__all__ = [
    "CameraLocation",
    "CameraNetwork",
    "WeatherPayload",
    "PredictionItem",
    "BatchPredictionResponse",
    "LevelBreakdown",
    "PredictionSummary",
    "ErrorResponse",
]

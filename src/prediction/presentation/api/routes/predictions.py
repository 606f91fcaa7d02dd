"""
API for congestion predictions.
"""
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from typing import Optional

from .....common.logging import setup_logger
from .....common.schemas import (
    BatchPredictionResponse, PredictionItem, WeatherPayload,
    PredictionSummary, LevelBreakdown, ErrorResponse
)
from ....application.service import PredictionService
from ....domain import BatchResponse, CongestionLevel

logger = setup_logger(__name__)

app = FastAPI()

# Singleton
_service: Optional[PredictionService] = None

def init_service(service: PredictionService):
    global _service
    _service = service

def get_service() -> PredictionService:
    if _service is None:
        raise HTTPException(500, "Prediction service not initialized")
    return _service

def _parse_int(name: str, raw: Optional[str]) -> Optional[int]:
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Query parameter '{name}' must be an integer, got {raw!r}") from None

def _error(exc: Exception) -> JSONResponse:
    body = ErrorResponse(error="Failed to generate predictions", details=str(exc) or repr(exc))
    return JSONResponse(status_code=500, content=body.model_dump())

def to_schema(response: BatchResponse) -> BatchPredictionResponse:
    return BatchPredictionResponse(
        predictions=[
            PredictionItem(
                location=p.location.name,
                latitude=p.location.latitude,
                longitude=p.location.longitude,
                congestion=int(p.level),
                congestion_label=p.label,
                probability=p.confidence
            )
            for p in response.predictions
        ],
        weather=WeatherPayload(**response.weather.to_dict()),
        timestamp=response.timestamp,
        hour=response.hour,
        day=response.day
    )

@app.get(
    "/predict",
    response_model=BatchPredictionResponse,
    responses={500: {"model": ErrorResponse}}
)
async def predict(hour: Optional[str] = None, day: Optional[str] = None):
    """
    Predicts congestion at every camera for the given hour (0-23) and day (1=Mon..7=Sun).
    Both default to the current time in the network's timezone.
    """
    try:
        service = get_service()
        response = await service.predict(_parse_int("hour", hour), _parse_int("day", day))
        return to_schema(response)
    except Exception as e:
        logger.error(f"Prediction error: {e}", exc_info=True)
        return _error(e)

@app.get(
    "/predict/summary",
    response_model=PredictionSummary,
    responses={500: {"model": ErrorResponse}}
)
async def predict_summary(hour: Optional[str] = None, day: Optional[str] = None):
    """Counts and percentages of locations per congestion level."""
    try:
        service = get_service()
        response = await service.predict(_parse_int("hour", hour), _parse_int("day", day))
        summary = service.summarize(response)
        levels = list(CongestionLevel)
        return PredictionSummary(
            total=summary.total,
            counts=LevelBreakdown(**{l.label.lower(): summary.counts[l] for l in levels}),
            percentages=LevelBreakdown(**{l.label.lower(): summary.percentage(l) for l in levels}),
            colors={l.label: l.color for l in levels},
            weather_condition=response.weather.condition,
            timestamp=response.timestamp,
            hour=response.hour,
            day=response.day
        )
    except Exception as e:
        logger.error(f"Summary error: {e}", exc_info=True)
        return _error(e)

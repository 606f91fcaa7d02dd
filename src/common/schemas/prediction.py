from typing import List, Literal, Dict
from pydantic import BaseModel, Field, ConfigDict

class WeatherPayload(BaseModel):
    """
    Weather reading used as prediction context.
    """
    temperature_2m: float = Field(..., description="Air temperature at 2 m (°C)")
    precipitation: float = Field(..., description="Total precipitation (mm)")
    rain: float = Field(..., description="Rain (mm)")
    wind_speed_10m: float = Field(..., description="Wind speed at 10 m (km/h)")

class PredictionItem(BaseModel):
    """
    Congestion prediction for a single camera location.
    """
    location: str = Field(..., description="Location name")
    latitude: float = Field(..., description="Latitude")
    longitude: float = Field(..., description="Longitude")
    congestion: int = Field(..., ge=0, le=2, description="Congestion level (0=Low, 1=Moderate, 2=High)")
    congestion_label: Literal["Low", "Moderate", "High"] = Field(..., alias="congestionLabel")
    probability: float = Field(..., ge=0.0, le=1.0, description="Prediction confidence")

    model_config = ConfigDict(populate_by_name=True)

class BatchPredictionResponse(BaseModel):
    """
    Predictions for all locations plus shared weather/time context.
    """
    predictions: List[PredictionItem]
    weather: WeatherPayload
    timestamp: str = Field(..., description="ISO-8601 generation time")
    hour: int = Field(..., ge=0, le=23)
    day: int = Field(..., ge=1, le=7, description="Weekday (1=Monday, 7=Sunday)")

class LevelBreakdown(BaseModel):
    low: int = Field(..., ge=0)
    moderate: int = Field(..., ge=0)
    high: int = Field(..., ge=0)

class PredictionSummary(BaseModel):
    """
    Aggregate traffic status over a batch.
    """
    total: int = Field(..., ge=0)
    counts: LevelBreakdown
    percentages: LevelBreakdown
    colors: Dict[str, str] = Field(default_factory=dict, description="Display colour per level label")
    weather_condition: str
    timestamp: str
    hour: int = Field(..., ge=0, le=23)
    day: int = Field(..., ge=1, le=7)

class ErrorResponse(BaseModel):
    error: str
    details: str

from dataclasses import dataclass, field
from typing import Optional, Dict, List, Any

@dataclass
class WeatherDefaultsConfig:
    temperature_2m: float = 20.0
    precipitation: float = 0.0
    rain: float = 0.0
    wind_speed_10m: float = 10.0

@dataclass
class WeatherConfig:
    base_url: str = "https://api.open-meteo.com/v1/forecast"
    timeout_seconds: float = 5.0
    forecast_days: int = 8
    defaults: WeatherDefaultsConfig = field(default_factory=WeatherDefaultsConfig)

@dataclass
class CacheConfig:
    enabled: bool = True
    current_ttl_seconds: int = 300
    forecast_ttl_seconds: int = 3600

@dataclass
class ThresholdConfig:
    high: float = 0.8
    moderate: float = 0.5

@dataclass
class HeuristicConfig:
    peak_windows: List[List[int]] = field(default_factory=lambda: [[7, 9], [16, 18]])
    peak_thresholds: ThresholdConfig = field(default_factory=lambda: ThresholdConfig(high=0.3, moderate=0.1))
    offpeak_thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    confidence_min: float = 0.5
    confidence_span: float = 0.4
    seed: Optional[int] = None # Set for reproducible demos; None uses system entropy

@dataclass
class LocationConfig:
    name: str
    latitude: float
    longitude: float

@dataclass
class PredictionConfig:
    timezone: str = "America/Chicago"
    weather: WeatherConfig = field(default_factory=WeatherConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    heuristic: HeuristicConfig = field(default_factory=HeuristicConfig)
    locations: List[LocationConfig] = field(default_factory=list)

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

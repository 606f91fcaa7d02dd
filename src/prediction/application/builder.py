import random
from omegaconf import DictConfig, OmegaConf
from typing import Optional, Dict, Tuple

from ..domain import Location, RandomSource, WeatherReading, Clock
from ..infrastructure.cache import WeatherCache
from ..infrastructure.locations import load_locations
from ..infrastructure.open_meteo import OpenMeteoClient
from ..infrastructure.weather_provider import OpenMeteoWeatherProvider
from .predictor import BatchPredictor, HeuristicClassifier, Thresholds
from .service import PredictionService
from .time_resolver import TimeResolver
from ...common.logging import setup_logger
from ...common.metrics import MetricsCollector

logger = setup_logger(__name__)

class PredictionApplicationBuilder:
    """
    Builder pattern for constructing the prediction service.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: DictConfig, clock: Optional[Clock] = None,
                 random_source: Optional[RandomSource] = None):
        self.config = config
        self.prediction_cfg = config.prediction
        self.metrics_collector = MetricsCollector()
        self.clock = clock
        self.random_source = random_source

        # Components
        self.locations: Optional[Tuple[Location, ...]] = None
        self.resolver: Optional[TimeResolver] = None
        self.client: Optional[OpenMeteoClient] = None
        self.weather_provider: Optional[OpenMeteoWeatherProvider] = None
        self.predictor: Optional[BatchPredictor] = None
        self.service: Optional[PredictionService] = None

    def build_locations(self) -> 'PredictionApplicationBuilder':
        entries = OmegaConf.to_container(self.prediction_cfg.locations, resolve=True)
        self.locations = load_locations(entries)
        logger.info(f"Loaded {len(self.locations)} camera locations")
        return self

    def build_resolver(self) -> 'PredictionApplicationBuilder':
        self.resolver = TimeResolver(timezone=self.prediction_cfg.timezone, clock=self.clock)
        return self

    def build_weather_provider(self, client: Optional[OpenMeteoClient] = None) -> 'PredictionApplicationBuilder':
        weather_cfg = self.prediction_cfg.weather
        cache_cfg = self.prediction_cfg.get('cache', {})

        self.client = client or OpenMeteoClient(
            base_url=weather_cfg.base_url,
            timezone=self.prediction_cfg.timezone,
            timeout=weather_cfg.timeout_seconds,
            forecast_days=weather_cfg.forecast_days
        )
        cache = None
        if cache_cfg.get('enabled', True):
            cache = WeatherCache(metrics=self.metrics_collector)

        self.weather_provider = OpenMeteoWeatherProvider(
            client=self.client,
            cache=cache,
            defaults=WeatherReading(**OmegaConf.to_container(weather_cfg.defaults, resolve=True)),
            current_ttl=cache_cfg.get('current_ttl_seconds', 300),
            forecast_ttl=cache_cfg.get('forecast_ttl_seconds', 3600),
            metrics=self.metrics_collector
        )
        return self

    def build_predictor(self) -> 'PredictionApplicationBuilder':
        h_cfg = self.prediction_cfg.heuristic
        random_source = self.random_source
        if random_source is None:
            seed = h_cfg.get('seed', None)
            random_source = random.Random(seed) if seed is not None else random.SystemRandom()

        classifier = HeuristicClassifier(
            random_source=random_source,
            peak_windows=[tuple(w) for w in h_cfg.peak_windows],
            peak_thresholds=Thresholds(**h_cfg.peak_thresholds),
            offpeak_thresholds=Thresholds(**h_cfg.offpeak_thresholds),
            confidence_min=h_cfg.confidence_min,
            confidence_span=h_cfg.confidence_span
        )
        self.predictor = BatchPredictor(classifier)
        return self

    def build_service(self) -> PredictionService:
        if not self.locations:
            self.build_locations()
        if not self.resolver:
            self.build_resolver()
        if not self.weather_provider:
            self.build_weather_provider()
        if not self.predictor:
            self.build_predictor()

        self.service = PredictionService(
            locations=self.locations,
            resolver=self.resolver,
            weather_source=self.weather_provider,
            predictor=self.predictor,
            metrics=self.metrics_collector
        )
        return self.service

    def get_components(self) -> Dict:
        """Returns built components for external use (e.g. shutdown hooks)"""
        return {
            'locations': self.locations,
            'resolver': self.resolver,
            'client': self.client,
            'weather_provider': self.weather_provider,
            'predictor': self.predictor,
            'metrics_collector': self.metrics_collector
        }

from omegaconf import DictConfig, OmegaConf
from pathlib import Path
from typing import Optional

from conf.config_models import PredictionConfig, ServerConfig
from ..exceptions import ConfigurationError

class ConfigManager:
    """Centralizes loading and validation of configuration"""

    REQUIRED_KEYS = ['timezone', 'weather', 'locations']

    def __init__(self, config_dir: Path = Path("conf")):
        self.config_dir = config_dir

    def load_prediction_config(self, profile: str = "default") -> DictConfig:
        """Loads a prediction profile and merges it over the typed defaults"""
        config_path = self.config_dir / "prediction" / f"{profile}.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        cfg = OmegaConf.load(config_path)
        return self.validate(cfg)

    def validate(self, cfg: DictConfig) -> DictConfig:
        for key in self.REQUIRED_KEYS:
            if key not in cfg:
                raise ConfigurationError(f"Missing required config key: {key}")

        try:
            return OmegaConf.merge(OmegaConf.structured(PredictionConfig), cfg)
        except Exception as e:
            raise ConfigurationError(f"Invalid prediction config: {e}") from e

    def server_config(self, cfg: Optional[DictConfig]) -> DictConfig:
        """Merges the ``server`` block over the typed server defaults"""
        try:
            return OmegaConf.merge(OmegaConf.structured(ServerConfig), cfg or {})
        except Exception as e:
            raise ConfigurationError(f"Invalid server config: {e}") from e

import os
import sys
import logging
import hydra
import uvicorn
from omegaconf import DictConfig, OmegaConf

# Add repo root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config.manager import ConfigManager
from src.common.logging import setup_logger
from src.prediction.application.builder import PredictionApplicationBuilder
from src.prediction.presentation.api import create_app

logger = setup_logger("congestion.server")

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    server_cfg = ConfigManager().server_config(cfg.get('server'))
    logger.setLevel(getattr(logging, server_cfg.log_level.upper(), logging.INFO))
    logger.info("Configuration loaded.")

    # Validate and fill typed defaults
    app_cfg = OmegaConf.create({"prediction": ConfigManager().validate(cfg.prediction)})

    builder = PredictionApplicationBuilder(app_cfg)
    service = builder.build_service()
    client = builder.get_components()['client']

    app = create_app(
        service,
        cors_origins=list(server_cfg.cors_origins),
        on_shutdown=[client.close]
    )

    logger.info(f"Starting server at http://{server_cfg.host}:{server_cfg.port}")
    uvicorn.run(app, host=server_cfg.host, port=server_cfg.port)

if __name__ == "__main__":
    main()

import os
import sys
import csv
import asyncio
import hydra
from omegaconf import DictConfig, OmegaConf

# Add repo root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.common.config.manager import ConfigManager
from src.common.logging import setup_logger
from src.prediction.application.builder import PredictionApplicationBuilder

logger = setup_logger("congestion.export")

HEADER = [
    "day", "hour", "location", "latitude", "longitude", "congestion",
    "congestion_label", "probability", "temperature_2m", "precipitation",
    "rain", "wind_speed_10m", "timestamp"
]

async def export(service, output_file: str):
    """Writes one row per (day, hour, location) for the coming week."""
    os.makedirs(os.path.dirname(output_file) or ".", exist_ok=True)
    with open(output_file, mode='w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(HEADER)
        for day in range(1, 8):
            for hour in range(24):
                response = await service.predict(hour=hour, day=day)
                w = response.weather
                for p in response.predictions:
                    writer.writerow([
                        day, hour, p.location.name, p.location.latitude, p.location.longitude,
                        int(p.level), p.label, f"{p.confidence:.4f}",
                        w.temperature_2m, w.precipitation, w.rain, w.wind_speed_10m,
                        response.timestamp
                    ])

@hydra.main(version_base=None, config_path="../conf", config_name="config")
def main(cfg: DictConfig):
    app_cfg = OmegaConf.create({"prediction": ConfigManager().validate(cfg.prediction)})
    builder = PredictionApplicationBuilder(app_cfg)
    service = builder.build_service()
    client = builder.get_components()['client']
    output_file = cfg.output_file

    async def run():
        try:
            await export(service, output_file)
        finally:
            await client.close()

    asyncio.run(run())
    metrics = service.metrics.get_metrics()
    logger.info(
        f"Wrote {metrics.requests_served} batches to {output_file} "
        f"(cache hits={metrics.weather_cache_hits}, fallbacks={metrics.weather_fallbacks})"
    )

if __name__ == "__main__":
    main()

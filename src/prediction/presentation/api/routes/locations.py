"""
API for the static camera network and service health.
"""
from fastapi import FastAPI

from .....common.schemas import CameraLocation, CameraNetwork
from .predictions import get_service

app = FastAPI()

@app.get("/locations", response_model=CameraNetwork)
async def get_locations():
    """Configured cameras in display order, with the map center."""
    service = get_service()
    lat, lon = service.center
    return CameraNetwork(
        locations=[
            CameraLocation(name=loc.name, latitude=loc.latitude, longitude=loc.longitude)
            for loc in service.locations
        ],
        center=CameraLocation(name="center", latitude=lat, longitude=lon),
        timezone=service.resolver.timezone
    )

@app.get("/health")
async def health():
    service = get_service()
    return {
        "status": "ok",
        "locations": len(service.locations),
        "timezone": service.resolver.timezone,
        "metrics": service.metrics.get_metrics().to_dict()
    }

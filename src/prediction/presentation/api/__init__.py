"""
API package.
"""
from typing import Optional, Sequence
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routes import predictions, locations
from ...application.service import PredictionService

def create_app(service: Optional[PredictionService] = None,
               cors_origins: Sequence[str] = ("*",),
               on_shutdown: Sequence = ()) -> FastAPI:
    """
    Builds the API application. ``on_shutdown`` callables are awaited on shutdown
    (e.g. closing the weather HTTP client).
    """
    app = FastAPI(title="Congestion Prediction API")

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(predictions.app.router, tags=["predictions"])
    app.include_router(locations.app.router, tags=["locations"])

    if service is not None:
        predictions.init_service(service)

    @app.on_event("shutdown")
    async def shutdown_event():
        for hook in on_shutdown:
            await hook()

    return app

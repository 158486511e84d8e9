from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import api_v1_router
from app.core.config import Settings, get_settings
from app.core.http import create_http_client
from app.core.logging import setup_logging
from app.services.connectivity import ConnectivityMonitor, ConnectivityObserver
from app.services.weather.home import WeatherOrchestrator
from app.services.weather.openweather import OpenWeatherRepository


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    if not settings.openweather_api_key:
        logger.warning("WEATHERHOME_OPENWEATHER_API_KEY is not set; upstream requests will be rejected")

    # Setup HTTP client
    client = create_http_client(settings)

    repository = OpenWeatherRepository(
        client,
        retries=settings.http_retries,
        backoff_seconds=settings.http_retry_backoff_seconds,
    )
    orchestrator = WeatherOrchestrator(repository, settings.weather_api_config())
    orchestrator.set_location(settings.default_latitude, settings.default_longitude)

    connectivity = ConnectivityObserver()
    monitor = ConnectivityMonitor(
        connectivity,
        client,
        probe_url=settings.connectivity_probe_url,
        interval_seconds=settings.connectivity_poll_interval_seconds,
    )
    if settings.connectivity_probe_enabled:
        monitor.start()

    app.state.orchestrator = orchestrator
    app.state.connectivity = connectivity

    try:
        yield
    finally:
        await monitor.stop()
        await orchestrator.close()
        await client.aclose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="weather home api",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Store settings in app state
    app.state.settings = settings

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(api_v1_router, prefix="/api/v1")
    return app


app = create_app()

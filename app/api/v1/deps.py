from __future__ import annotations

from fastapi import Request

from app.services.connectivity import ConnectivityObserver
from app.services.weather.home import WeatherOrchestrator


def get_orchestrator(request: Request) -> WeatherOrchestrator:
    """Return the orchestrator created in the application lifespan."""
    return request.app.state.orchestrator


def get_connectivity(request: Request) -> ConnectivityObserver:
    return request.app.state.connectivity

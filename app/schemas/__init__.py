from __future__ import annotations

from app.schemas.state import ConnectivityState, Error, Loading, Success, UiState
from app.schemas.weather import Coordinates, CurrentWeather, ForecastWeather, Weather

__all__ = [
    "ConnectivityState",
    "Coordinates",
    "CurrentWeather",
    "Error",
    "ForecastWeather",
    "Loading",
    "Success",
    "UiState",
    "Weather",
]

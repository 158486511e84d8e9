from __future__ import annotations

from typing import Protocol

from app.schemas.weather import CurrentWeather, ForecastWeather


class WeatherRepository(Protocol):
    """Source of current and forecast weather for a relative endpoint URL."""

    async def get_current_weather(self, end_url: str) -> CurrentWeather:
        ...

    async def get_forecast_weather(self, end_url: str) -> ForecastWeather:
        ...

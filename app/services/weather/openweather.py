"""OpenWeather current and forecast endpoints."""

from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel

from app.core.http import request_with_retries
from app.schemas.weather import CurrentWeather, ForecastWeather


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class WeatherUpstreamError(RuntimeError):
    """Raised when OpenWeather answers with a non-200 status."""

    def __init__(self, end_url: str, status_code: int) -> None:
        super().__init__(f"Weather upstream status {status_code} for {end_url.split('?', 1)[0]}")
        self.status_code = status_code


class OpenWeatherRepository:
    """Issues GET requests against the client's base URL and parses the payload."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        retries: int = 0,
        backoff_seconds: float = 0.0,
    ) -> None:
        self._client = client
        self._retries = retries
        self._backoff_seconds = backoff_seconds

    async def get_current_weather(self, end_url: str) -> CurrentWeather:
        return await self._get(end_url, CurrentWeather)

    async def get_forecast_weather(self, end_url: str) -> ForecastWeather:
        return await self._get(end_url, ForecastWeather)

    async def _get(self, end_url: str, model: type[ModelT]) -> ModelT:
        resp = await request_with_retries(
            self._client,
            method="GET",
            url=end_url,
            retries=self._retries,
            backoff_seconds=self._backoff_seconds,
        )
        if resp.status_code != 200:
            raise WeatherUpstreamError(end_url, resp.status_code)

        logger.debug("OpenWeather %s returned %d bytes", model.__name__, len(resp.content))
        return model.model_validate(resp.json())

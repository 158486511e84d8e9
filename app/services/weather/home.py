"""Home screen weather state: two concurrent fetches reduced to one UI state."""

from __future__ import annotations

import asyncio
import logging

from app.core.config import WeatherApiConfig
from app.schemas.state import Error, Loading, Success, UiState
from app.schemas.weather import Coordinates, Weather
from app.services.weather.base import WeatherRepository


logger = logging.getLogger(__name__)


CURRENT_WEATHER_TEMPLATE = "weather?lat={lat}&lon={lon}&appid={key}&units={units}"
FORECAST_WEATHER_TEMPLATE = "forecast?lat={lat}&lon={lon}&appid={key}&units={units}"


class WeatherOrchestrator:
    """Owns the home screen ``UiState``.

    Every call to :meth:`fetch_weather` is one fetch cycle: the state goes to
    ``Loading``, the current and forecast requests run concurrently, and the
    state ends in ``Success`` only when both returned. Any failure of either
    request ends the cycle in ``Error`` and the other result is dropped.

    The orchestrator is the only writer of ``ui_state``. When cycles overlap,
    only the most recently started one may write its terminal state; older
    cycles finish without touching it.
    """

    def __init__(self, repository: WeatherRepository, config: WeatherApiConfig) -> None:
        self._repository = repository
        self._config = config
        self._latitude = 0.0
        self._longitude = 0.0
        self._ui_state: UiState = Loading()
        self._task: asyncio.Task[UiState] | None = None
        self._cycle = 0
        self.last_error: BaseException | None = None

    @property
    def ui_state(self) -> UiState:
        return self._ui_state

    @property
    def location(self) -> Coordinates:
        return Coordinates(latitude=self._latitude, longitude=self._longitude)

    def set_location(self, lat: float, lon: float) -> None:
        # Passed through as-is; the upstream API decides what is out of range.
        self._latitude = float(lat)
        self._longitude = float(lon)

    def current_weather_url(self) -> str:
        return self._end_url(CURRENT_WEATHER_TEMPLATE)

    def forecast_weather_url(self) -> str:
        return self._end_url(FORECAST_WEATHER_TEMPLATE)

    async def fetch_weather(self) -> UiState:
        self._cycle += 1
        cycle = self._cycle
        self._set_state(Loading())
        self.last_error = None

        current_url = self.current_weather_url()
        forecast_url = self.forecast_weather_url()

        # Waits for both sides; a cancelled sub-fetch comes back as a result.
        current, forecast = await asyncio.gather(
            self._repository.get_current_weather(current_url),
            self._repository.get_forecast_weather(forecast_url),
            return_exceptions=True,
        )

        if cycle != self._cycle:
            logger.debug("Weather fetch cycle %d superseded by %d", cycle, self._cycle)
            return self._ui_state

        failure = next((r for r in (current, forecast) if isinstance(r, BaseException)), None)
        if failure is not None:
            self.last_error = failure
            logger.error("Weather fetch failed: %s: %s", type(failure).__name__, failure)
            self._set_state(Error())
        else:
            self._set_state(Success(weather=Weather(current_weather=current, forecast_weather=forecast)))
        return self._ui_state

    def launch_fetch(self) -> asyncio.Task[UiState]:
        """Start a fetch cycle in the background and return its task."""
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._set_state(Loading())
        self._task = asyncio.get_running_loop().create_task(self.fetch_weather())
        return self._task

    async def close(self) -> None:
        task, self._task = self._task, None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    def _end_url(self, template: str) -> str:
        return template.format(
            lat=self._latitude,
            lon=self._longitude,
            key=self._config.api_key,
            units=self._config.units,
        )

    def _set_state(self, state: UiState) -> None:
        logger.debug("Weather UI state %s -> %s", self._ui_state.status, state.status)
        self._ui_state = state

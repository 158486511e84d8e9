from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.weather import Coordinates, Weather


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    weather: Weather


class Error(BaseModel):
    """A failed fetch cycle. The cause is deliberately not part of the state."""

    model_config = ConfigDict(frozen=True)

    status: Literal["error"] = "error"


UiState = Annotated[Union[Loading, Success, Error], Field(discriminator="status")]


class ConnectivityState(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class ConnectivityResponse(BaseModel):
    state: ConnectivityState


class WeatherHomeResponse(BaseModel):
    ui_state: UiState
    connectivity: ConnectivityState
    location: Coordinates

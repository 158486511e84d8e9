from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Upstream(BaseModel):
    # OpenWeather adds fields over time; keep whatever it sends.
    model_config = ConfigDict(extra="allow")


class Coordinates(BaseModel):
    latitude: float = 0.0
    longitude: float = 0.0


class Coord(_Upstream):
    lat: float | None = None
    lon: float | None = None


class Condition(_Upstream):
    id: int | None = None
    main: str | None = None
    description: str | None = None
    icon: str | None = None


class MainBlock(_Upstream):
    temp: float | None = Field(None, description="Temperature in the requested unit system.")
    feels_like: float | None = None
    temp_min: float | None = None
    temp_max: float | None = None
    pressure: float | None = Field(None, description="Atmospheric pressure (hPa).")
    humidity: float | None = Field(None, description="Relative humidity (%).")


class Wind(_Upstream):
    speed: float | None = None
    deg: float | None = None
    gust: float | None = None


class Clouds(_Upstream):
    all: int | None = Field(None, description="Cloudiness (%).")


class Sys(_Upstream):
    country: str | None = None
    sunrise: int | None = None
    sunset: int | None = None


class CurrentWeather(_Upstream):
    coord: Coord | None = None
    weather: list[Condition] = Field(default_factory=list)
    main: MainBlock | None = None
    visibility: int | None = None
    wind: Wind | None = None
    clouds: Clouds | None = None
    dt: int | None = Field(None, description="Observation time (unix, UTC).")
    sys: Sys | None = None
    timezone: int | None = Field(None, description="Shift in seconds from UTC.")
    id: int | None = None
    name: str | None = None


class ForecastEntry(_Upstream):
    dt: int
    main: MainBlock | None = None
    weather: list[Condition] = Field(default_factory=list)
    clouds: Clouds | None = None
    wind: Wind | None = None
    pop: float | None = Field(None, description="Probability of precipitation (0..1).")
    dt_txt: str | None = None


class City(_Upstream):
    id: int | None = None
    name: str | None = None
    coord: Coord | None = None
    country: str | None = None
    timezone: int | None = None
    sunrise: int | None = None
    sunset: int | None = None


class ForecastWeather(_Upstream):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    cnt: int | None = None
    entries: list[ForecastEntry] = Field(default_factory=list, alias="list")
    city: City | None = None


class Weather(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_weather: CurrentWeather
    forecast_weather: ForecastWeather

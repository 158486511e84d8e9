from __future__ import annotations

import json
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


OPENWEATHER_BASE_URL = "https://api.openweathermap.org/data/2.5/"
CONNECTIVITY_PROBE_URL = "https://clients3.google.com/generate_204"


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


@dataclass(frozen=True)
class WeatherApiConfig:
    """Credential and unit system baked into request URLs.

    The base URL belongs to the HTTP client, see ``create_http_client``.
    """

    api_key: str
    units: str = "imperial"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHERHOME_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    http_retries: int = Field(default=0, ge=0, le=5)
    http_retry_backoff_seconds: float = Field(default=0.35, ge=0.0, le=5.0)

    # OpenWeather
    openweather_api_key: str = Field(default="")
    openweather_base_url: str = Field(default=OPENWEATHER_BASE_URL)
    units: str = Field(default="imperial", pattern="^(standard|metric|imperial)$")

    # Initial location, overwritten by PUT /weather/location
    default_latitude: float = Field(default=0.0)
    default_longitude: float = Field(default=0.0)

    # Connectivity
    connectivity_probe_enabled: bool = Field(default=True)
    connectivity_probe_url: str = Field(default=CONNECTIVITY_PROBE_URL)
    connectivity_poll_interval_seconds: float = Field(default=15.0, ge=1.0, le=3600.0)

    log_level: str = Field(default="INFO")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        # Allow WEATHERHOME_CORS_ORIGINS as JSON array or comma-separated string.
        if not isinstance(value, str):
            return value
        parsed = value.strip()
        if parsed.startswith("["):
            try:
                return [str(x).strip() for x in json.loads(parsed) if str(x).strip()]
            except ValueError:
                pass
        return [s.strip() for s in parsed.strip("[]").split(",") if s.strip()]

    def weather_api_config(self) -> WeatherApiConfig:
        return WeatherApiConfig(
            api_key=self.openweather_api_key,
            units=self.units,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()

import pytest

from app.core.config import Settings


@pytest.fixture
def settings():
    return Settings(
        openweather_api_key="test-key",
        connectivity_probe_enabled=False,
        cors_origins=[],
        log_level="DEBUG",
    )


@pytest.fixture
def current_payload():
    return {
        "coord": {"lon": -74.0, "lat": 40.7},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "base": "stations",
        "main": {
            "temp": 68.5,
            "feels_like": 67.9,
            "temp_min": 65.1,
            "temp_max": 71.2,
            "pressure": 1015,
            "humidity": 52,
        },
        "visibility": 10000,
        "wind": {"speed": 8.05, "deg": 250},
        "clouds": {"all": 0},
        "dt": 1760875200,
        "sys": {"country": "US", "sunrise": 1760871600, "sunset": 1760911800},
        "timezone": -14400,
        "id": 5128581,
        "name": "New York",
        "cod": 200,
    }


@pytest.fixture
def forecast_payload():
    return {
        "cod": "200",
        "message": 0,
        "cnt": 2,
        "list": [
            {
                "dt": 1760886000,
                "main": {"temp": 70.2, "feels_like": 69.8, "pressure": 1014, "humidity": 48},
                "weather": [{"id": 801, "main": "Clouds", "description": "few clouds", "icon": "02d"}],
                "clouds": {"all": 20},
                "wind": {"speed": 9.2, "deg": 240},
                "pop": 0,
                "dt_txt": "2025-10-19 15:00:00",
            },
            {
                "dt": 1760896800,
                "main": {"temp": 66.0, "feels_like": 65.4, "pressure": 1015, "humidity": 60},
                "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10n"}],
                "clouds": {"all": 75},
                "wind": {"speed": 6.1, "deg": 210},
                "pop": 0.35,
                "dt_txt": "2025-10-19 18:00:00",
            },
        ],
        "city": {"id": 5128581, "name": "New York", "country": "US", "timezone": -14400},
    }

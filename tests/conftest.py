from __future__ import annotations

import copy

import pytest

from requests_mock import Mocker


LONDON_PAYLOAD = {
    "location": {
        "name": "London",
        "region": "City of London, Greater London",
        "country": "United Kingdom",
        "lat": 51.52,
        "lon": -0.11,
        "tz_id": "Europe/London",
        "localtime_epoch": 1729339200,
        "localtime": "2024-10-19 13:00",
    },
    "current": {
        "last_updated_epoch": 1729338300,
        "last_updated": "2024-10-19 12:45",
        "temp_c": 18.0,
        "temp_f": 64.4,
        "is_day": 1,
        "condition": {
            "text": "Cloudy",
            "icon": "//cdn.weatherapi.com/weather/64x64/day/119.png",
            "code": 1006,
        },
        "wind_mph": 9.4,
        "wind_kph": 15.1,
        "wind_degree": 230,
        "wind_dir": "SW",
        "pressure_mb": 1012.0,
        "pressure_in": 29.88,
        "precip_mm": 0.0,
        "precip_in": 0.0,
        "humidity": 72,
        "cloud": 100,
        "feelslike_c": 18.0,
        "feelslike_f": 64.4,
        "vis_km": 10.0,
        "vis_miles": 6.0,
        "uv": 3.0,
        "gust_mph": 12.3,
        "gust_kph": 19.8,
    },
}


class TimeController:
    def __init__(self) -> None:
        self.now = 0.0

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def london_payload() -> dict:
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture
def clock() -> TimeController:
    return TimeController()

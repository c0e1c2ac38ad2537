from __future__ import annotations

from datetime import datetime

import pytest

from weatherdash.domain.models import HourlyPoint, Location
from weatherdash.providers.weather.base import ProviderError

TOKYO = Location(id="tokyo", name="Tokyo, Japan", latitude=35.6764, longitude=139.6501, timezone="Asia/Tokyo")


def make_point(day: str, hour: int, temperature: float, code: int = 0) -> HourlyPoint:
    return HourlyPoint(
        timestamp=datetime.fromisoformat(f"{day}T{hour:02d}:00"),
        temperature_c=temperature,
        weather_code=code,
    )


class StaticWeatherProvider:
    def __init__(self, forecast=None, actual=None, locations=None, fail: bool = False) -> None:
        self.forecast = list(forecast or [])
        self.actual = list(actual or [])
        self.locations = list(locations or [])
        self.fail = fail
        self.calls: list[tuple] = []

    async def fetch_forecast(self, location, date):
        self.calls.append(("forecast", location.id, date))
        if self.fail:
            raise ProviderError("Request failed (503): forecast")
        return list(self.forecast)

    async def fetch_actual(self, location, date):
        self.calls.append(("archive", location.id, date))
        if self.fail:
            raise ProviderError("Request failed (503): archive")
        return list(self.actual)

    async def search_locations(self, query, count=5, language="en"):
        self.calls.append(("search", query, count, language))
        if self.fail:
            raise ProviderError("Request failed (503): geocoding")
        return list(self.locations)


@pytest.fixture()
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def tokyo() -> Location:
    return TOKYO


@pytest.fixture()
def point():
    return make_point


@pytest.fixture()
def tokyo_provider():
    forecast = [make_point("2024-01-10", 0, 10, 0), make_point("2024-01-10", 1, 11, 1)]
    actual = [make_point("2024-01-09", 0, 7, 61), make_point("2024-01-09", 1, 6, 63)]
    return StaticWeatherProvider(forecast=forecast, actual=actual, locations=[TOKYO])


@pytest.fixture()
def failing_provider():
    return StaticWeatherProvider(fail=True)

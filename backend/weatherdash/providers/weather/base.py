from __future__ import annotations

from typing import Protocol

from weatherdash.domain.models import HourlyPoint, Location


class ProviderError(RuntimeError):
    """Upstream weather/geocoding call failed (status, transport or payload)."""


class WeatherProvider(Protocol):
    """Contract for hourly weather and geocoding providers."""

    async def fetch_forecast(self, location: Location, date: str) -> list[HourlyPoint]:
        """Hourly forecast for ``date`` and the following day, local time."""
        raise NotImplementedError

    async def fetch_actual(self, location: Location, date: str) -> list[HourlyPoint]:
        """Hourly archive data for the day before ``date`` through ``date``."""
        raise NotImplementedError

    async def search_locations(self, query: str, count: int = 5, language: str = "en") -> list[Location]:
        raise NotImplementedError

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

import httpx

from weatherdash.domain.dates import calendar_date_in, shift_date
from weatherdash.domain.models import HourlyPoint, Location
from weatherdash.infra.log import get_logger
from weatherdash.infra.weather.open_meteo_client import OpenMeteoClient

from .base import ProviderError, WeatherProvider

MIN_SEARCH_COUNT = 1
MAX_SEARCH_COUNT = 10

logger = get_logger(__name__)


def clamp_count(count: int) -> int:
    return min(max(count, MIN_SEARCH_COUNT), MAX_SEARCH_COUNT)


class OpenMeteoWeatherProvider(WeatherProvider):
    def __init__(
        self,
        client: Optional[OpenMeteoClient] = None,
        *,
        today: Optional[Callable[[str], str]] = None,
    ):
        self.client = client or OpenMeteoClient()
        self._today = today or calendar_date_in

    async def fetch_forecast(self, location: Location, date: str) -> List[HourlyPoint]:
        # past anchor dates are served by the historical-forecast feed
        is_past = date < self._today(location.timezone)
        fetch = self.client.historical_forecast if is_past else self.client.forecast
        feed = "historical_forecast" if is_past else "forecast"
        payload = await self._call(
            feed,
            fetch,
            lat=location.latitude,
            lon=location.longitude,
            timezone=location.timezone,
            start_date=date,
            end_date=shift_date(date, 1),
        )
        return self._map_hourly(payload.get("hourly") or {})

    async def fetch_actual(self, location: Location, date: str) -> List[HourlyPoint]:
        payload = await self._call(
            "archive",
            self.client.archive,
            lat=location.latitude,
            lon=location.longitude,
            timezone=location.timezone,
            start_date=shift_date(date, -1),
            end_date=date,
        )
        return self._map_hourly(payload.get("hourly") or {})

    async def search_locations(self, query: str, count: int = 5, language: str = "en") -> List[Location]:
        payload = await self._call(
            "geocoding",
            self.client.search,
            query,
            count=clamp_count(count),
            language=language,
        )
        return [self._map_location(item) for item in payload.get("results") or []]

    async def _call(self, feed: str, fetch, *args, **kwargs) -> dict:
        try:
            payload = await fetch(*args, **kwargs)
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("open_meteo.request_failed", feed=feed, status=status)
            raise ProviderError(f"Request failed ({status}): {feed}") from exc
        except httpx.HTTPError as exc:
            logger.warning("open_meteo.transport_error", feed=feed, error=str(exc))
            raise ProviderError(f"Request failed: {feed}") from exc
        except ValueError as exc:
            raise ProviderError(f"Invalid JSON from {feed}") from exc
        if not isinstance(payload, dict):
            raise ProviderError(f"Unexpected payload from {feed}")
        return payload

    @staticmethod
    def _map_hourly(hourly: dict) -> List[HourlyPoint]:
        times = hourly.get("time") or []
        temps = hourly.get("temperature_2m") or []
        codes = hourly.get("weathercode") or []
        points: List[HourlyPoint] = []
        for ts, temp, code in zip(times, temps, codes):
            if temp is None:
                continue
            timestamp = OpenMeteoWeatherProvider._parse_time(ts)
            if timestamp is None:
                continue
            points.append(
                HourlyPoint(
                    timestamp=timestamp,
                    temperature_c=float(temp),
                    weather_code=int(code) if code is not None else -1,
                )
            )
        return points

    @staticmethod
    def _parse_time(value: Optional[str]) -> Optional[datetime]:
        # local wall-clock time, e.g. "2024-01-10T09:00"
        if not value:
            return None
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError:
            return None
        return parsed.replace(tzinfo=None)

    @staticmethod
    def _map_location(item: dict) -> Location:
        name = item.get("name")
        lat = item.get("latitude")
        lon = item.get("longitude")
        label_parts = [part for part in (name, item.get("admin1"), item.get("country")) if part]
        identifier = item.get("id")
        return Location(
            id=str(identifier) if identifier is not None else f"{name}-{lat}-{lon}",
            name=", ".join(label_parts),
            latitude=float(lat) if lat is not None else 0.0,
            longitude=float(lon) if lon is not None else 0.0,
            timezone=item.get("timezone") or "UTC",
        )

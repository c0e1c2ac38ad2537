from __future__ import annotations

from typing import Optional

import httpx

from weatherdash.config import Settings, get_settings


class OpenMeteoClient:
    """Thin async wrapper over the Open-Meteo HTTP endpoints.

    Returns decoded JSON as-is; non-2xx responses raise ``httpx.HTTPStatusError``.
    """

    HOURLY_FIELDS = ["temperature_2m", "weathercode"]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.timeout = self.settings.http_timeout
        self._transport = transport

    async def fetch_hourly(
        self,
        url: str,
        *,
        lat: float,
        lon: float,
        timezone: str,
        start_date: str,
        end_date: str,
    ) -> dict:
        params = {
            "latitude": lat,
            "longitude": lon,
            "start_date": start_date,
            "end_date": end_date,
            "hourly": ",".join(self.HOURLY_FIELDS),
            "timezone": timezone,
        }
        return await self._get_json(url, params)

    async def forecast(self, **kwargs) -> dict:
        return await self.fetch_hourly(self.settings.forecast_url, **kwargs)

    async def historical_forecast(self, **kwargs) -> dict:
        return await self.fetch_hourly(self.settings.historical_url, **kwargs)

    async def archive(self, **kwargs) -> dict:
        return await self.fetch_hourly(self.settings.archive_url, **kwargs)

    async def search(self, name: str, *, count: int = 5, language: str = "en") -> dict:
        params = {"name": name, "count": count, "language": language}
        return await self._get_json(self.settings.geocoding_url, params)

    async def _get_json(self, url: str, params: dict) -> dict:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.get(url, params=params)
            resp.raise_for_status()
            return resp.json()

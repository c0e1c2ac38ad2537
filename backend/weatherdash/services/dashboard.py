from __future__ import annotations

import asyncio
from typing import Optional

from weatherdash.domain.alignment import align_series, derive_highlights
from weatherdash.domain.dates import current_local_hour
from weatherdash.domain.models import DashboardRequest, DashboardSnapshot, DashboardView, Location
from weatherdash.domain.weather_codes import DEFAULT_ICON_EVERY, icon_timeline
from weatherdash.infra.log import get_logger
from weatherdash.providers.weather.base import WeatherProvider

logger = get_logger(__name__)


class DashboardService:
    def __init__(self, provider: WeatherProvider, *, icon_every: int = DEFAULT_ICON_EVERY):
        if provider is None:
            raise ValueError("provider is required")
        self.provider = provider
        self.icon_every = icon_every

    async def load_snapshot(self, location: Location, date: str) -> DashboardSnapshot:
        forecast, actual = await asyncio.gather(
            self.provider.fetch_forecast(location, date),
            self.provider.fetch_actual(location, date),
        )
        logger.info(
            "dashboard.fetched",
            location=location.id,
            date=date,
            forecast=len(forecast),
            actual=len(actual),
        )
        return DashboardSnapshot(location=location, date=date, forecast=tuple(forecast), actual=tuple(actual))

    def build_view(
        self,
        snapshot: DashboardSnapshot,
        *,
        rotate: bool = False,
        current_hour: Optional[int] = None,
    ) -> DashboardView:
        if rotate and current_hour is None:
            current_hour = current_local_hour(snapshot.location.timezone)
        points = align_series(
            snapshot.forecast,
            snapshot.actual,
            snapshot.date,
            rotate_to_current_hour=rotate,
            current_hour=current_hour,
        )
        return DashboardView(
            snapshot=snapshot,
            points=tuple(points),
            highlights=derive_highlights(points),
            icons=tuple(icon_timeline(points, self.icon_every)),
            rotated=rotate,
        )

    async def load(self, request: DashboardRequest, *, current_hour: Optional[int] = None) -> DashboardView:
        snapshot = await self.load_snapshot(request.location, request.date)
        return self.build_view(snapshot, rotate=request.rotate, current_hour=current_hour)

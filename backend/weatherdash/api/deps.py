from __future__ import annotations

from fastapi import HTTPException, Request

from weatherdash.providers.weather.base import WeatherProvider
from weatherdash.services.dashboard import DashboardService


def get_provider(request: Request) -> WeatherProvider:
    provider = getattr(request.app.state, "weather_provider", None)
    if provider is None:
        raise HTTPException(status_code=500, detail="Weather provider not configured")
    return provider


def get_dashboard_service(request: Request) -> DashboardService:
    return DashboardService(get_provider(request))

from __future__ import annotations

import math
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from weatherdash.api.deps import get_dashboard_service
from weatherdash.domain.dates import is_iso_date
from weatherdash.domain.models import DashboardRequest, Location
from weatherdash.domain.presets import PRESET_LOCATIONS
from weatherdash.infra.log import get_logger
from weatherdash.providers.weather.base import ProviderError
from weatherdash.services.dashboard import DashboardService

router = APIRouter(tags=["weather"])
logger = get_logger(__name__)

INVALID_PARAMS = "Required parameters: lat, lon, timezone, date(YYYY-MM-DD)"
DEFAULT_NAME = "Selected location"


@router.get("/weather")
async def get_weather(
    lat: Optional[str] = Query(None),
    lon: Optional[str] = Query(None),
    timezone: Optional[str] = Query(None),
    date: Optional[str] = Query(None, description="Anchor date YYYY-MM-DD"),
    name: Optional[str] = Query(None),
    rotate: bool = Query(False, description="Start the window at the current local hour"),
    service: DashboardService = Depends(get_dashboard_service),
):
    latitude = _parse_number(lat)
    longitude = _parse_number(lon)
    if latitude is None or longitude is None or not timezone or not is_iso_date(date):
        raise HTTPException(status_code=400, detail=INVALID_PARAMS)

    location = Location(
        id=f"{lat},{lon}",
        name=name or DEFAULT_NAME,
        latitude=latitude,
        longitude=longitude,
        timezone=timezone,
    )
    request = DashboardRequest(location=location, date=date, rotate=rotate)
    try:
        view = await service.load(request)
    except ProviderError as exc:
        logger.error("weather.fetch_failed", location=location.id, date=date, error=str(exc))
        raise HTTPException(status_code=502, detail="Failed to fetch weather data") from exc
    return view.to_dict()


@router.get("/presets")
def list_presets():
    return [loc.to_dict() for loc in PRESET_LOCATIONS]


def _parse_number(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if math.isfinite(number) else None

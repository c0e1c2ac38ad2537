from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from weatherdash.api.deps import get_provider
from weatherdash.infra.log import get_logger
from weatherdash.providers.weather.base import ProviderError, WeatherProvider
from weatherdash.providers.weather.open_meteo import clamp_count

router = APIRouter(tags=["geocode"])
logger = get_logger(__name__)

DEFAULT_COUNT = 5


@router.get("/geocode")
async def search_locations(
    request: Request,
    q: Optional[str] = Query(None, description="Free-text place name"),
    count: Optional[str] = Query(None),
    language: Optional[str] = Query(None),
    provider: WeatherProvider = Depends(get_provider),
):
    query = (q or "").strip()
    if not query:
        raise HTTPException(status_code=400, detail="Missing query parameter: q")
    language = language or request.app.state.settings.language
    try:
        results = await provider.search_locations(query, _parse_count(count), language)
    except ProviderError as exc:
        logger.error("geocode.search_failed", query=query, error=str(exc))
        raise HTTPException(status_code=502, detail="Failed to search locations") from exc
    return [loc.to_dict() for loc in results]


def _parse_count(value: Optional[str]) -> int:
    try:
        parsed = int(value) if value is not None else DEFAULT_COUNT
    except ValueError:
        return DEFAULT_COUNT
    return clamp_count(parsed)

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _resolve_zone(timezone_name: Optional[str]) -> Optional[tzinfo]:
    # None means "system local time" for datetime.astimezone
    if not timezone_name:
        return None
    try:
        return ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError):
        return None


def _localize(timezone_name: Optional[str], instant: Optional[datetime]) -> datetime:
    if instant is None:
        instant = datetime.now(timezone.utc)
    elif instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(_resolve_zone(timezone_name))


def calendar_date_in(timezone_name: Optional[str], instant: Optional[datetime] = None) -> str:
    """Calendar date (YYYY-MM-DD) of ``instant`` as seen in ``timezone_name``.

    Unknown timezone names fall back to the system local timezone.
    Naive instants are read as UTC.
    """
    return _localize(timezone_name, instant).date().isoformat()


def current_local_hour(timezone_name: Optional[str], instant: Optional[datetime] = None) -> int:
    return _localize(timezone_name, instant).hour


def shift_date(value: str, delta_days: int) -> str:
    shifted = date.fromisoformat(value) + timedelta(days=delta_days)
    return shifted.isoformat()


def is_iso_date(value: Optional[str]) -> bool:
    if not isinstance(value, str) or not ISO_DATE_RE.match(value):
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True

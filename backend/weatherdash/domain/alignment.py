from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .dates import shift_date
from .models import AlignedPoint, Highlights, HourlyPoint

WINDOW_HOURS = 24
NEXT_DAY_MARKER = "+1"
FREEZING_C = 0.0


def sort_series(points: Iterable[HourlyPoint]) -> List[HourlyPoint]:
    return sorted(points, key=lambda p: p.timestamp)


def hour_label(hour: int, next_day: bool = False) -> str:
    label = f"{hour:02d}"
    if next_day:
        label += NEXT_DAY_MARKER
    return label


def _index_by_hour(points: Iterable[HourlyPoint]) -> Dict[Tuple[str, int], float]:
    lookup: Dict[Tuple[str, int], float] = {}
    for point in points:
        # later duplicates overwrite earlier ones
        lookup[(point.day, point.hour)] = point.temperature_c
    return lookup


def _rotation_start(series: Sequence[HourlyPoint], anchor_date: str, current_hour: int) -> int:
    first_on_anchor: Optional[int] = None
    for idx, point in enumerate(series):
        if point.day != anchor_date:
            continue
        if first_on_anchor is None:
            first_on_anchor = idx
        if point.hour >= current_hour:
            return idx
    return first_on_anchor if first_on_anchor is not None else 0


def select_window(
    series: Sequence[HourlyPoint],
    anchor_date: str,
    *,
    rotate_to_current_hour: bool = False,
    current_hour: Optional[int] = None,
) -> List[HourlyPoint]:
    """Pick the forecast points to display from an already sorted series.

    Without rotation this is the anchor day from hour 0, capped at 24 points.
    With rotation the window starts at the current hour on the anchor day and
    wraps around the whole series, so next-day points fill the tail.
    """
    if not series:
        return []
    if not rotate_to_current_hour:
        return [p for p in series if p.day == anchor_date][:WINDOW_HOURS]
    if current_hour is None:
        current_hour = datetime.now().hour
    start = _rotation_start(series, anchor_date, current_hour)
    size = min(WINDOW_HOURS, len(series))
    return [series[(start + offset) % len(series)] for offset in range(size)]


def align_series(
    forecast: Iterable[HourlyPoint],
    actual: Iterable[HourlyPoint],
    anchor_date: str,
    *,
    rotate_to_current_hour: bool = False,
    current_hour: Optional[int] = None,
) -> List[AlignedPoint]:
    """Overlay the prior day's actuals onto the forecast window, hour by hour."""
    window = select_window(
        sort_series(forecast),
        anchor_date,
        rotate_to_current_hour=rotate_to_current_hour,
        current_hour=current_hour,
    )
    actual_by_hour = _index_by_hour(sort_series(actual))
    next_day = shift_date(anchor_date, 1)
    comparison_days: Dict[str, str] = {}

    aligned: List[AlignedPoint] = []
    for position, point in enumerate(window):
        day = point.day
        if day not in comparison_days:
            comparison_days[day] = shift_date(day, -1)
        is_next_day = day == next_day
        aligned.append(
            AlignedPoint(
                position=position,
                hour=point.hour,
                label=hour_label(point.hour, is_next_day),
                forecast=point.temperature_c,
                actual=actual_by_hour.get((comparison_days[day], point.hour)),
                weather_code=point.weather_code,
                next_day=is_next_day,
            )
        )
    return aligned


def derive_highlights(points: Sequence[AlignedPoint]) -> Highlights:
    candidates = [p for p in points if p.forecast is not None]
    if not candidates:
        return Highlights()
    low = min(p.forecast for p in candidates)
    high = max(p.forecast for p in candidates)
    minimum = next(p.position for p in candidates if p.forecast == low)
    maximum = next(p.position for p in candidates if p.forecast == high)
    freezing = tuple(p.position for p in candidates if p.forecast <= FREEZING_C)
    return Highlights(minimum=minimum, maximum=maximum, freezing=freezing)

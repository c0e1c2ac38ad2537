from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Location:
    id: str
    name: str = field(compare=False)
    latitude: float = field(compare=False)
    longitude: float = field(compare=False)
    timezone: str = field(default="UTC", compare=False)

    def __post_init__(self):
        if not self.id:
            raise ValueError("location id is required")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "timezone": self.timezone,
        }


@dataclass(frozen=True)
class HourlyPoint:
    """One hourly sample; ``timestamp`` is local wall-clock time."""

    timestamp: datetime
    temperature_c: float
    weather_code: int

    @property
    def day(self) -> str:
        return self.timestamp.date().isoformat()

    @property
    def hour(self) -> int:
        return self.timestamp.hour

    @property
    def iso_time(self) -> str:
        return self.timestamp.strftime("%Y-%m-%dT%H:%M")

    def to_dict(self) -> dict:
        return {
            "iso_time": self.iso_time,
            "hour": self.hour,
            "temperature_c": self.temperature_c,
            "weather_code": self.weather_code,
        }


@dataclass(frozen=True)
class AlignedPoint:
    position: int
    hour: int
    label: str
    forecast: Optional[float] = None
    actual: Optional[float] = None
    weather_code: Optional[int] = None
    next_day: bool = False

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "hour": self.hour,
            "label": self.label,
            "forecast": self.forecast,
            "actual": self.actual,
            "weather_code": self.weather_code,
            "next_day": self.next_day,
        }


@dataclass(frozen=True)
class Highlights:
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    freezing: tuple[int, ...] = ()

    def marks_for(self, position: int) -> list[str]:
        marks = []
        if position == self.minimum:
            marks.append("min")
        if position == self.maximum:
            marks.append("max")
        if position in self.freezing:
            marks.append("freezing")
        return marks

    def to_dict(self) -> dict:
        return {
            "minimum": self.minimum,
            "maximum": self.maximum,
            "freezing": list(self.freezing),
        }


@dataclass(frozen=True)
class DashboardRequest:
    location: Location
    date: str
    rotate: bool = False


@dataclass(frozen=True)
class DashboardSnapshot:
    location: Location
    date: str
    forecast: tuple[HourlyPoint, ...] = ()
    actual: tuple[HourlyPoint, ...] = ()

    def to_dict(self) -> dict:
        return {
            "location": self.location.to_dict(),
            "date": self.date,
            "today_forecast": [p.to_dict() for p in self.forecast],
            "yesterday_actual": [p.to_dict() for p in self.actual],
        }


@dataclass(frozen=True)
class DashboardView:
    snapshot: DashboardSnapshot
    points: tuple[AlignedPoint, ...]
    highlights: Highlights
    icons: tuple[dict, ...] = ()
    rotated: bool = False

    def to_dict(self) -> dict:
        payload = self.snapshot.to_dict()
        payload["rotated"] = self.rotated
        payload["aligned"] = [p.to_dict() for p in self.points]
        payload["highlights"] = self.highlights.to_dict()
        payload["icons"] = list(self.icons)
        return payload

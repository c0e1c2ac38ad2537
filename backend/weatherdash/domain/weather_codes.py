from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .models import AlignedPoint


@dataclass(frozen=True)
class WeatherDescriptor:
    label: str
    symbol: str
    emoji: str
    rain_chance: int


# WMO weather interpretation codes as returned by Open-Meteo
WEATHER_CODES: Dict[int, WeatherDescriptor] = {
    0: WeatherDescriptor("Clear sky", "SUN", "☀️", 0),
    1: WeatherDescriptor("Mainly clear", "SUN", "☀️", 0),
    2: WeatherDescriptor("Partly cloudy", "CLD", "\U0001f324️", 10),
    3: WeatherDescriptor("Overcast", "CLD", "☁️", 10),
    45: WeatherDescriptor("Fog", "FOG", "\U0001f32b️", 10),
    48: WeatherDescriptor("Rime fog", "FOG", "\U0001f32b️", 10),
    51: WeatherDescriptor("Light drizzle", "DRZ", "\U0001f326️", 20),
    53: WeatherDescriptor("Drizzle", "DRZ", "\U0001f326️", 30),
    55: WeatherDescriptor("Dense drizzle", "DRZ", "\U0001f326️", 35),
    61: WeatherDescriptor("Light rain", "RN", "\U0001f327️", 40),
    63: WeatherDescriptor("Rain", "RN", "\U0001f327️", 50),
    65: WeatherDescriptor("Heavy rain", "RN", "\U0001f327️", 60),
    71: WeatherDescriptor("Light snow", "SN", "\U0001f328️", 30),
    73: WeatherDescriptor("Snow", "SN", "\U0001f328️", 40),
    75: WeatherDescriptor("Heavy snow", "SN", "\U0001f328️", 60),
    80: WeatherDescriptor("Rain showers", "SH", "\U0001f326️", 40),
    81: WeatherDescriptor("Rain showers", "SH", "\U0001f326️", 50),
    82: WeatherDescriptor("Violent rain showers", "SH", "\U0001f326️", 60),
    95: WeatherDescriptor("Thunderstorm", "TH", "⛈️", 70),
    96: WeatherDescriptor("Thunderstorm with hail", "TH", "⛈️", 70),
    99: WeatherDescriptor("Thunderstorm with hail", "TH", "⛈️", 70),
}

UNKNOWN = WeatherDescriptor("Unknown", "NA", "❓", 0)

DEFAULT_ICON_EVERY = 3


def describe_weather_code(code: Optional[int]) -> WeatherDescriptor:
    if code is None:
        return UNKNOWN
    return WEATHER_CODES.get(code, UNKNOWN)


def icon_timeline(points: Iterable[AlignedPoint], every: int = DEFAULT_ICON_EVERY) -> List[dict]:
    """Every ``every``-th aligned point with its descriptor, from position 0."""
    step = max(1, every)
    icons: List[dict] = []
    for point in points:
        if point.position % step:
            continue
        descriptor = describe_weather_code(point.weather_code)
        icons.append(
            {
                "position": point.position,
                "hour": point.hour,
                "label": point.label,
                "temperature_c": point.forecast,
                "weather_code": point.weather_code,
                "condition": descriptor.label,
                "symbol": descriptor.symbol,
                "emoji": descriptor.emoji,
                "rain_chance": descriptor.rain_chance,
            }
        )
    return icons

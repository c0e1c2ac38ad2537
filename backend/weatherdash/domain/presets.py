from __future__ import annotations

from typing import Dict, List

from .models import Location

PRESET_LOCATIONS: List[Location] = [
    Location(id="tokyo", name="Tokyo, Japan", latitude=35.6764, longitude=139.6501, timezone="Asia/Tokyo"),
    Location(id="new-york", name="New York, USA", latitude=40.7128, longitude=-74.006, timezone="America/New_York"),
    Location(id="london", name="London, UK", latitude=51.5074, longitude=-0.1278, timezone="Europe/London"),
    Location(id="sydney", name="Sydney, Australia", latitude=-33.8688, longitude=151.2093, timezone="Australia/Sydney"),
]

_BY_ID: Dict[str, Location] = {loc.id: loc for loc in PRESET_LOCATIONS}

DEFAULT_LOCATION = PRESET_LOCATIONS[0]


def get_preset(location_id: str) -> Location:
    try:
        return _BY_ID[location_id]
    except KeyError as exc:
        raise KeyError(f"Preset '{location_id}' is not defined") from exc


def is_preset(location: Location) -> bool:
    return location.id in _BY_ID

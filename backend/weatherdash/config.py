from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    forecast_url: str = "https://api.open-meteo.com/v1/forecast"
    historical_url: str = "https://historical-forecast-api.open-meteo.com/v1/forecast"
    archive_url: str = "https://archive-api.open-meteo.com/v1/archive"
    geocoding_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    http_timeout: float = 30.0
    frontend_origin: str = "http://localhost:5174"
    language: str = "en"
    search_debounce_s: float = 0.35
    log_level: str = "INFO"
    log_json: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            forecast_url=os.getenv("OPEN_METEO_FORECAST_URL", defaults.forecast_url),
            historical_url=os.getenv("OPEN_METEO_HISTORICAL_URL", defaults.historical_url),
            archive_url=os.getenv("OPEN_METEO_ARCHIVE_URL", defaults.archive_url),
            geocoding_url=os.getenv("OPEN_METEO_GEOCODING_URL", defaults.geocoding_url),
            http_timeout=float(os.getenv("WEATHER_HTTP_TIMEOUT", str(defaults.http_timeout))),
            frontend_origin=os.getenv("FRONTEND_ORIGIN", defaults.frontend_origin),
            language=os.getenv("WEATHERDASH_LANGUAGE", defaults.language),
            search_debounce_s=float(os.getenv("SEARCH_DEBOUNCE_SECONDS", str(defaults.search_debounce_s))),
            log_level=os.getenv("LOG_LEVEL", defaults.log_level),
            log_json=_env_bool("LOG_JSON", defaults.log_json),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()

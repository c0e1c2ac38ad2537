from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from weatherdash.api.routers import geocode, weather
from weatherdash.config import Settings, get_settings
from weatherdash.infra.log import configure_logging
from weatherdash.providers.weather.base import WeatherProvider
from weatherdash.providers.weather.open_meteo import OpenMeteoWeatherProvider


def create_app(provider: Optional[WeatherProvider] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)
    app = FastAPI(title="Weather Dashboard API", version="0.1.0")
    app.state.weather_provider = provider or OpenMeteoWeatherProvider()
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_origin],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(weather.router, prefix="/api")
    app.include_router(geocode.router, prefix="/api")
    return app


app = create_app()

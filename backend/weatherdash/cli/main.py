import asyncio
from typing import Optional

import typer

from weatherdash.config import get_settings
from weatherdash.domain.dates import calendar_date_in, is_iso_date
from weatherdash.domain.models import DashboardRequest, DashboardView, Location
from weatherdash.domain.presets import DEFAULT_LOCATION, PRESET_LOCATIONS, get_preset, is_preset
from weatherdash.domain.weather_codes import DEFAULT_ICON_EVERY
from weatherdash.infra.log import configure_logging
from weatherdash.providers.weather.base import WeatherProvider
from weatherdash.providers.weather.open_meteo import OpenMeteoWeatherProvider
from weatherdash.services.dashboard import DashboardService
from weatherdash.services.session import ERROR, DashboardSession, LocationSearch

app = typer.Typer(help="Weather dashboard: today's forecast against yesterday's actuals")


def build_provider() -> WeatherProvider:
    return OpenMeteoWeatherProvider()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level, settings.log_json)


@app.command("presets")
def cli_presets():
    typer.echo("id\tname\ttimezone")
    for loc in PRESET_LOCATIONS:
        typer.echo(f"{loc.id}\t{loc.name}\t{loc.timezone}")


@app.command("dashboard")
def cli_dashboard(
    location: Optional[str] = typer.Option(None, help="Preset id (tokyo, new-york, london, sydney)"),
    lat: Optional[float] = typer.Option(None, help="Latitude of a custom location"),
    lon: Optional[float] = typer.Option(None, help="Longitude of a custom location"),
    timezone: Optional[str] = typer.Option(None, help="IANA timezone of a custom location"),
    name: str = typer.Option("Selected location", help="Label for a custom location"),
    date: Optional[str] = typer.Option(None, help="Anchor date YYYY-MM-DD (default: today there)"),
    rotate: bool = typer.Option(False, help="Start at the current local hour"),
    every: int = typer.Option(DEFAULT_ICON_EVERY, help="Icon timeline period in hours"),
):
    target = _resolve_location(location, lat, lon, timezone, name)
    anchor = date or calendar_date_in(target.timezone)
    if not is_iso_date(anchor):
        typer.echo(f"Invalid date: {anchor}", err=True)
        raise typer.Exit(code=2)

    session = DashboardSession(DashboardService(build_provider(), icon_every=every))
    view = asyncio.run(session.select(DashboardRequest(location=target, date=anchor, rotate=rotate)))
    if view is None:
        typer.echo(f"Failed to fetch weather data: {session.error}", err=True)
        raise typer.Exit(code=1)
    _print_view(view)


@app.command("search")
def cli_search(
    query: str = typer.Argument(..., help="Place name"),
    count: int = typer.Option(5, help="Maximum results (1-10)"),
    language: Optional[str] = typer.Option(None, help="Result language"),
):
    search = LocationSearch(build_provider(), delay=0, count=count, language=language)

    async def run():
        search.submit(query)
        return await search.wait()

    results = asyncio.run(run())
    if search.state == ERROR:
        typer.echo(f"Failed to search locations: {search.error}", err=True)
        raise typer.Exit(code=1)
    if not results:
        typer.echo("No matching locations")
        raise typer.Exit(code=0)
    typer.echo("id\tname\tlat\tlon\ttimezone")
    for loc in results:
        typer.echo(f"{loc.id}\t{loc.name}\t{loc.latitude:.2f}\t{loc.longitude:.2f}\t{loc.timezone}")


def _resolve_location(
    preset_id: Optional[str],
    lat: Optional[float],
    lon: Optional[float],
    timezone: Optional[str],
    name: str,
) -> Location:
    if preset_id:
        try:
            return get_preset(preset_id)
        except KeyError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(code=2)
    if lat is None and lon is None:
        return DEFAULT_LOCATION
    if lat is None or lon is None or not timezone:
        typer.echo("--lat, --lon and --timezone are required together", err=True)
        raise typer.Exit(code=2)
    return Location(id=f"{lat},{lon}", name=name, latitude=lat, longitude=lon, timezone=timezone)


def _fmt(value: Optional[float]) -> str:
    return f"{value:.1f}" if value is not None else "-"


def _print_view(view: DashboardView) -> None:
    loc = view.snapshot.location
    name = loc.name if is_preset(loc) else f"{loc.name} (custom)"
    typer.echo(f"{name} / {view.snapshot.date} / {loc.timezone}")
    if not view.points:
        typer.echo("No hourly data for this date")
        return
    typer.echo("hour\tforecast\tactual\tmarks")
    for point in view.points:
        marks = ",".join(view.highlights.marks_for(point.position))
        typer.echo(f"{point.label}\t{_fmt(point.forecast)}\t{_fmt(point.actual)}\t{marks}")
    typer.echo("")
    typer.echo("  ".join(f"{icon['label']} {icon['symbol']}" for icon in view.icons))


if __name__ == "__main__":
    app()

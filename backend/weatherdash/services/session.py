from __future__ import annotations

import asyncio
from typing import List, Optional

from weatherdash.config import get_settings
from weatherdash.domain.models import DashboardRequest, DashboardView, Location
from weatherdash.infra.log import get_logger
from weatherdash.providers.weather.base import ProviderError, WeatherProvider

from .dashboard import DashboardService

logger = get_logger(__name__)

IDLE = "idle"
LOADING = "loading"
ERROR = "error"


class CancellationToken:
    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class DashboardSession:
    """The currently displayed dashboard for one client.

    Every ``select`` supersedes the previous one; a result (or error) that
    arrives for a superseded request is dropped, so the view always matches
    the latest selection rather than the latest response.
    """

    def __init__(self, service: DashboardService) -> None:
        self.service = service
        self.view: Optional[DashboardView] = None
        self.error: Optional[str] = None
        self.state = IDLE
        self._token: Optional[CancellationToken] = None

    async def select(self, request: DashboardRequest) -> Optional[DashboardView]:
        if self._token is not None:
            self._token.cancel()
        token = self._token = CancellationToken()
        self.state = LOADING
        try:
            view = await self.service.load(request)
        except ProviderError as exc:
            if token.cancelled:
                logger.debug("dashboard.stale_error_dropped", location=request.location.id, date=request.date)
                return None
            logger.error("dashboard.fetch_failed", location=request.location.id, date=request.date, error=str(exc))
            # previous view stays on screen
            self.error = str(exc)
            self.state = ERROR
            return None
        if token.cancelled:
            logger.debug("dashboard.stale_result_dropped", location=request.location.id, date=request.date)
            return None
        self.view = view
        self.error = None
        self.state = IDLE
        return view


class LocationSearch:
    """Debounced, cancellable incremental location search."""

    MIN_QUERY_LENGTH = 2

    def __init__(
        self,
        provider: WeatherProvider,
        *,
        delay: Optional[float] = None,
        count: int = 5,
        language: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self.provider = provider
        self.delay = settings.search_debounce_s if delay is None else delay
        self.count = count
        self.language = language or settings.language
        self.results: List[Location] = []
        self.error: Optional[str] = None
        self.state = IDLE
        self._token: Optional[CancellationToken] = None
        self._task: Optional[asyncio.Task] = None

    def submit(self, text: str) -> Optional[asyncio.Task]:
        """Schedule a search for ``text``; must be called from a running loop."""
        self.cancel()
        query = text.strip()
        if len(query) < self.MIN_QUERY_LENGTH:
            self.results = []
            self.error = None
            self.state = IDLE
            return None
        token = self._token = CancellationToken()
        self._task = asyncio.create_task(self._run(query, token))
        return self._task

    def cancel(self) -> None:
        if self._token is not None:
            self._token.cancel()
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def wait(self) -> List[Location]:
        task = self._task
        if task is not None:
            await asyncio.wait({task})
        return self.results

    async def _run(self, query: str, token: CancellationToken) -> List[Location]:
        await asyncio.sleep(self.delay)
        if token.cancelled:
            return []
        self.state = LOADING
        try:
            results = await self.provider.search_locations(query, self.count, self.language)
        except ProviderError as exc:
            if not token.cancelled:
                logger.warning("search.failed", query=query, error=str(exc))
                # previous results stay listed
                self.error = str(exc)
                self.state = ERROR
            return []
        if token.cancelled:
            logger.debug("search.stale_result_dropped", query=query)
            return []
        self.results = results
        self.error = None
        self.state = IDLE
        return results

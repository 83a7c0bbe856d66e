"""Application container: one cache, one gateway, views built on demand."""

from __future__ import annotations

from typing import Self

from .api_logging import configure_log_dir, get_logger
from .config import Settings, get_settings
from .data.base import DataGateway
from .data.cache import TTLCache
from .data.gateway import OpenF1Gateway
from .data.repository import CachedRepository
from .views import DriverListView, SessionDetailView, SessionListView, TelemetryView


class F1TelemetryApp:
    """Owns the shared cache and gateway for the lifetime of a UI session.

    Usage::

        async with F1TelemetryApp() as app:
            view = app.session_list(2024)
            await view.load()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        gateway: DataGateway | None = None,
        cache: TTLCache | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        configure_log_dir(self.settings.log_dir)
        self.cache = cache if cache is not None else TTLCache()
        self.gateway = gateway or OpenF1Gateway(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
            min_request_interval=self.settings.min_request_interval,
        )
        self.repository = CachedRepository(self.gateway, self.cache)

    # ── Views ────────────────────────────────────────────────────────────────

    def session_list(self, year: int | None = None) -> SessionListView:
        return SessionListView(self.repository, year, first_season=self.settings.first_season)

    def session_detail(self, session_key: int) -> SessionDetailView:
        return SessionDetailView(self.repository, session_key)

    def driver_list(self, year: int | None = None) -> DriverListView:
        return DriverListView(self.repository, year)

    def telemetry(self, session_key: int, driver_number: int) -> TelemetryView:
        return TelemetryView(
            self.repository, session_key, driver_number,
            telemetry_window=self.settings.telemetry_window,
        )

    # ── Lifecycle ────────────────────────────────────────────────────────────

    def clear_cache(self) -> None:
        """Drop every cached record; the next load of any view refetches."""
        count = len(self.cache)
        self.cache.clear()
        get_logger().info("CACHE CLEAR: %d entries", count)

    async def aclose(self) -> None:
        await self.gateway.close()
        self.cache.clear()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

"""Season driver roster."""

from __future__ import annotations

from datetime import UTC, datetime

from ..api_logging import log_service_call
from ..data.repository import CachedRepository
from ..models import Driver
from .base import BaseView


class DriverListView(BaseView):
    """Drivers entered in the latest Race of the selected season."""

    def __init__(self, repo: CachedRepository, year: int | None = None) -> None:
        super().__init__(repo, title="F1 Drivers")
        self.selected_year: int = year if year is not None else datetime.now(UTC).year
        self.drivers: list[Driver] = []

    async def _load(self, force_refresh: bool) -> None:
        result = await self._repo.driver_roster(self.selected_year, force_refresh=force_refresh)
        if not result.ok:
            self.set_error(result.error or "")
        self.drivers = sorted(
            result.items,
            key=lambda d: d.driver_number if d.driver_number is not None else float("inf"),
        )
        self._notify("drivers")

    @log_service_call
    async def set_year(self, year: int) -> None:
        if year == self.selected_year:
            return
        self.selected_year = year
        self._notify("selected_year")
        await self.load()

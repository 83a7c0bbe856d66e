"""One session: its drivers, latest weather and running classification."""

from __future__ import annotations

from ..api_logging import get_logger
from ..data.repository import CachedRepository
from ..models import Driver, Position, Session, Weather
from ..services.aggregation import latest_positions, latest_weather
from .base import BaseView


class SessionDetailView(BaseView):
    def __init__(self, repo: CachedRepository, session_key: int) -> None:
        super().__init__(repo, title="Session Details")
        self.session_key = session_key
        self.session: Session | None = None
        self.drivers: list[Driver] = []
        self.current_weather: Weather | None = None
        self.classification: list[Position] = []

    async def _load(self, force_refresh: bool) -> None:
        result = await self._repo.session(self.session_key, force_refresh=force_refresh)
        self.session = result.first
        if self.session is None:
            self.set_error(result.error or "Session not found")
            return
        self.title = f"{self.session.session_name} - {self.session.circuit_short_name}"

        # Drivers, weather and positions are optional extras on this page
        logger = get_logger()
        drivers = await self._repo.drivers(self.session_key, force_refresh=force_refresh)
        if not drivers.ok:
            logger.warning("SessionDetailView: %s", drivers.error)
        self.drivers = sorted(
            drivers.items,
            key=lambda d: d.driver_number if d.driver_number is not None else float("inf"),
        )

        weather = await self._repo.weather(self.session_key, force_refresh=force_refresh)
        if not weather.ok:
            logger.warning("SessionDetailView: %s", weather.error)
        self.current_weather = latest_weather(weather.items)

        positions = await self._repo.positions(self.session_key, force_refresh=force_refresh)
        if not positions.ok:
            logger.warning("SessionDetailView: %s", positions.error)
        self.classification = latest_positions(positions.items)
        self._notify("session")

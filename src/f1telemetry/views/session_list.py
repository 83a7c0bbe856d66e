"""Season session browser: year picker, type filter, meeting groups."""

from __future__ import annotations

from datetime import UTC, datetime

from ..api_logging import get_logger, log_service_call
from ..constants import FILTER_ALL, FIRST_SEASON
from ..data.repository import CachedRepository
from ..models import Meeting, Session
from ..services.sessions import SessionGroup, group_sessions
from .base import BaseView


def _newest_first(sessions: list[Session]) -> list[Session]:
    return sorted(
        sessions,
        key=lambda s: s.date_start.timestamp() if s.date_start else float("-inf"),
        reverse=True,
    )


class SessionListView(BaseView):
    """All sessions of the selected season, flat and grouped by meeting.

    Meetings are loaded alongside sessions to name the groups and to keep a
    weekend's sessions together; when they are unavailable the groups fall
    back to each session's own start date.
    """

    def __init__(
        self,
        repo: CachedRepository,
        year: int | None = None,
        first_season: int = FIRST_SEASON,
    ) -> None:
        super().__init__(repo, title="F1 Sessions")
        current = datetime.now(UTC).year
        self.available_years: list[int] = list(range(current, first_season - 1, -1))
        self.selected_year: int = year if year is not None else current
        self.session_filter: str = FILTER_ALL
        self.sessions: list[Session] = []
        self.meetings: list[Meeting] = []
        self.groups: list[SessionGroup] = []

    async def _load(self, force_refresh: bool) -> None:
        result = await self._repo.sessions(self.selected_year, force_refresh=force_refresh)
        if not result.ok:
            self.sessions = []
            self.groups = []
            self.set_error(result.error or "")
            return

        meetings = await self._repo.meetings(self.selected_year)
        if not meetings.ok:
            get_logger().warning("SessionListView: grouping without meetings: %s", meetings.error)
        self.meetings = meetings.items
        self.sessions = _newest_first(result.items)
        self._regroup()

    def _regroup(self) -> None:
        self.groups = group_sessions(self.sessions, self.session_filter, self.meetings)
        self._notify("groups")

    @log_service_call
    async def set_year(self, year: int) -> None:
        """Switch season and reload; selecting the current year is a no-op."""
        if year == self.selected_year:
            return
        self.selected_year = year
        self._notify("selected_year")
        await self.load()

    def apply_filter(self, token: str) -> None:
        """Rebuild the groups from the loaded sessions for a new filter token."""
        self.session_filter = token or FILTER_ALL
        self._regroup()

    def toggle_group(self, group: SessionGroup) -> None:
        group.toggle()
        self._notify("groups")

"""Session model (practice, qualifying, sprint, race)."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

SessionStatus = Literal["LIVE", "UPCOMING", "COMPLETED"]


def _now_for(reference: datetime) -> datetime:
    """Current time, naive or aware to match *reference*."""
    now = datetime.now(UTC)
    if reference.tzinfo is None:
        return now.replace(tzinfo=None)
    return now


class Session(BaseModel):
    """F1 session (practice, qualifying, sprint, race)."""

    model_config = ConfigDict(frozen=True)

    circuit_key: int | None = None
    circuit_short_name: str | None = None
    country_code: str | None = None
    country_key: int | None = None
    country_name: str | None = None
    date_end: datetime | None = None
    date_start: datetime | None = None
    gmt_offset: str | None = None
    location: str | None = None
    meeting_key: int | None = None
    session_key: int | None = None
    session_name: str | None = None
    session_type: str | None = None
    year: int | None = None

    @property
    def formatted_date(self) -> str:
        return self.date_start.strftime("%b %d, %Y") if self.date_start else ""

    def status(self, now: datetime | None = None) -> SessionStatus | None:
        """LIVE, UPCOMING or COMPLETED relative to *now*; None without dates."""
        if self.date_start is None:
            return None
        now = now or _now_for(self.date_start)
        if now < self.date_start:
            return "UPCOMING"
        if self.date_end is None or now <= self.date_end:
            return "LIVE"
        return "COMPLETED"

"""Driver position model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

_PODIUM_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


class Position(BaseModel):
    """Driver position change during a session."""

    model_config = ConfigDict(frozen=True)

    date: datetime | None = None
    driver_number: int | None = None
    meeting_key: int | None = None
    position: int | None = None
    session_key: int | None = None

    @property
    def ordinal(self) -> str:
        if self.position is None:
            return "-"
        return f"{self.position}{_PODIUM_SUFFIXES.get(self.position, 'th')}"

    @property
    def is_on_podium(self) -> bool:
        return self.position is not None and self.position <= 3

    @property
    def is_in_points(self) -> bool:
        return self.position is not None and self.position <= 10

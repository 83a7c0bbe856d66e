"""Driver information model."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from f1telemetry.constants import TEAM_COLOR_FALLBACK

_HEX_COLOR_RE = re.compile(r"^[0-9a-fA-F]{6}$")


class Driver(BaseModel):
    """Driver info for a specific session."""

    model_config = ConfigDict(frozen=True)

    broadcast_name: str | None = None
    country_code: str | None = None
    driver_number: int | None = None
    first_name: str | None = None
    full_name: str | None = None
    headshot_url: str | None = None
    last_name: str | None = None
    meeting_key: int | None = None
    name_acronym: str | None = None
    session_key: int | None = None
    team_colour: str | None = None
    team_name: str | None = None

    @property
    def team_color(self) -> str:
        """Team colour as '#RRGGBB', gray when missing or malformed."""
        raw = (self.team_colour or "").lstrip("#")
        if _HEX_COLOR_RE.match(raw):
            return f"#{raw.upper()}"
        return TEAM_COLOR_FALLBACK

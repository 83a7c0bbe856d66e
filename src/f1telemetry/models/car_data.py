"""Car telemetry sample model (~3.7 Hz sample rate)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

# OpenF1 reports several "flap open" codes besides the documented 8
_DRS_ACTIVE_CODES = frozenset({8, 10, 12, 14})


class CarData(BaseModel):
    """Vehicle telemetry snapshot."""

    model_config = ConfigDict(frozen=True)

    brake: int | None = None
    date: datetime | None = None
    driver_number: int | None = None
    drs: int | None = None
    meeting_key: int | None = None
    n_gear: int | None = None
    rpm: int | None = None
    session_key: int | None = None
    speed: int | None = None
    throttle: int | None = None

    @property
    def is_braking(self) -> bool:
        """True when the brake signal is applied (OpenF1 sends 0 or 100)."""
        return bool(self.brake)

    @property
    def is_drs_active(self) -> bool:
        return self.drs in _DRS_ACTIVE_CODES

    @property
    def drs_status(self) -> str:
        if self.drs == 0:
            return "Off"
        if self.drs == 1:
            return "Available"
        if self.is_drs_active:
            return "Active"
        return "Unknown"

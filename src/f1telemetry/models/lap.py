"""Lap timing model."""

from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict

from f1telemetry.formatters import format_lap_time


class Lap(BaseModel):
    """Individual lap data with sector times and speeds."""

    model_config = ConfigDict(frozen=True)

    date_start: datetime | None = None
    driver_number: int | None = None
    duration_sector_1: float | None = None
    duration_sector_2: float | None = None
    duration_sector_3: float | None = None
    i1_speed: float | None = None
    i2_speed: float | None = None
    is_pit_out_lap: bool | None = None
    lap_duration: float | None = None
    lap_number: int | None = None
    meeting_key: int | None = None
    segments_sector_1: list[int | None] | None = None
    segments_sector_2: list[int | None] | None = None
    segments_sector_3: list[int | None] | None = None
    session_key: int | None = None
    st_speed: float | None = None

    @property
    def has_all_sectors(self) -> bool:
        return (
            self.duration_sector_1 is not None
            and self.duration_sector_2 is not None
            and self.duration_sector_3 is not None
        )

    @property
    def total_sector_time(self) -> float | None:
        """Sum of all three sector durations, or None if any is missing."""
        if not self.has_all_sectors:
            return None
        return self.duration_sector_1 + self.duration_sector_2 + self.duration_sector_3  # type: ignore[operator]

    @property
    def date_end(self) -> datetime | None:
        """Start timestamp plus lap duration, or None if either is missing."""
        if self.date_start is None or self.lap_duration is None:
            return None
        return self.date_start + timedelta(seconds=self.lap_duration)

    @property
    def formatted_lap_time(self) -> str:
        return format_lap_time(self.lap_duration)

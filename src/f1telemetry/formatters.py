"""Formatting helpers for lap times, sectors and telemetry values."""

from __future__ import annotations

import math

from .constants import MISSING_LAP_TIME


def _truncated_millis(seconds: float) -> int:
    # round to 6 places first so 89.876 (stored as 89.87599...) keeps its last digit
    return math.floor(round(seconds * 1000, 6))


def format_lap_time(seconds: float | None) -> str:
    """Format seconds as M:SS.mmm, truncating to the millisecond."""
    if seconds is None:
        return MISSING_LAP_TIME
    mins, millis = divmod(_truncated_millis(seconds), 60_000)
    secs, millis = divmod(millis, 1000)
    return f"{mins}:{secs:02d}.{millis:03d}"


def format_seconds(seconds: float | None) -> str:
    """Format a duration as plain seconds with millisecond precision."""
    if seconds is None:
        return "--.---"
    return f"{seconds:.3f}"


def format_speed(speed: int | float | None) -> str:
    if speed is None:
        return "-- km/h"
    return f"{speed:.0f} km/h"

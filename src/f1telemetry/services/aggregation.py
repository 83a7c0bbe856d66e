"""Lap and telemetry aggregates for presentation (pure functions)."""

from __future__ import annotations

import statistics
from dataclasses import dataclass
from typing import Iterable

from ..constants import (
    BRAKE_COLOR,
    F1_RED,
    FASTEST_LAP_COLOR,
    NOT_AVAILABLE,
    SECTOR_COLORS,
    SPEED_COLOR,
    TELEMETRY_WINDOW,
)
from ..formatters import format_lap_time, format_seconds, format_speed
from ..models import CarData, Lap, Position, Weather

_SECTOR_FIELDS = ("duration_sector_1", "duration_sector_2", "duration_sector_3")


@dataclass(frozen=True)
class ChartEntry:
    value: float
    label: str
    value_label: str
    color: str


@dataclass(frozen=True)
class LapStatistics:
    fastest_lap: Lap | None
    average_lap_formatted: str
    total_lap_count: int

    @property
    def fastest_lap_formatted(self) -> str:
        if self.fastest_lap is None:
            return NOT_AVAILABLE
        return format_lap_time(self.fastest_lap.lap_duration)


@dataclass(frozen=True)
class SectorAverages:
    sector_1: float | None
    sector_2: float | None
    sector_3: float | None

    def as_tuple(self) -> tuple[float | None, float | None, float | None]:
        return (self.sector_1, self.sector_2, self.sector_3)


def timed_laps(laps: Iterable[Lap]) -> list[Lap]:
    """Return laps with a lap_duration, in input order."""
    return [lap for lap in laps if lap.lap_duration is not None]


def fastest_lap(laps: Iterable[Lap]) -> Lap | None:
    """Lap with the smallest duration; the first one wins a tie."""
    return min(timed_laps(laps), key=lambda lap: lap.lap_duration, default=None)  # type: ignore[arg-type, return-value]


def average_lap_time(laps: Iterable[Lap]) -> float | None:
    """Mean duration over timed laps, or None if there are none."""
    durations = [lap.lap_duration for lap in timed_laps(laps)]
    return statistics.mean(durations) if durations else None  # type: ignore[type-var]


def lap_statistics(laps: list[Lap]) -> LapStatistics:
    """Fastest lap, formatted average lap and lap count for one driver."""
    average = average_lap_time(laps)
    return LapStatistics(
        fastest_lap=fastest_lap(laps),
        average_lap_formatted=format_lap_time(average) if average is not None else NOT_AVAILABLE,
        total_lap_count=len(laps),
    )


def sector_averages(laps: list[Lap]) -> SectorAverages | None:
    """Per-sector means, each over the laps where that sector is present.

    Returns None, meaning no sector chart, unless at least one lap has all
    three sector durations.
    """
    if not any(lap.has_all_sectors for lap in laps):
        return None
    means: list[float | None] = []
    for field_name in _SECTOR_FIELDS:
        values = [getattr(lap, field_name) for lap in laps if getattr(lap, field_name) is not None]
        means.append(statistics.mean(values) if values else None)
    return SectorAverages(*means)


def lap_chart_series(laps: list[Lap], color: str = F1_RED) -> list[ChartEntry]:
    """One bar per timed lap in lap-number order; the fastest lap stands out."""
    best = fastest_lap(laps)
    ordered = sorted(
        timed_laps(laps),
        key=lambda lap: lap.lap_number if lap.lap_number is not None else float("inf"),
    )
    return [
        ChartEntry(
            value=lap.lap_duration,  # type: ignore[arg-type]
            label=f"L{lap.lap_number}",
            value_label=format_seconds(lap.lap_duration),
            color=FASTEST_LAP_COLOR if lap is best else color,
        )
        for lap in ordered
    ]


def sector_chart_series(laps: list[Lap]) -> list[ChartEntry]:
    """Three sector-average bars, or an empty series when sectors are missing."""
    averages = sector_averages(laps)
    if averages is None:
        return []
    return [
        ChartEntry(value=value, label=f"S{i}", value_label=format_seconds(value), color=SECTOR_COLORS[i - 1])
        for i, value in enumerate(averages.as_tuple(), start=1)
        if value is not None
    ]


def telemetry_chart_series(
    samples: list[CarData], limit: int = TELEMETRY_WINDOW,
) -> list[ChartEntry]:
    """Speed trace of the first *limit* samples by timestamp.

    Samples without a timestamp or speed are skipped; braking samples get
    the brake color.
    """
    usable = sorted(
        (s for s in samples if s.date is not None and s.speed is not None),
        key=lambda s: s.date,  # type: ignore[arg-type, return-value]
    )
    return [
        ChartEntry(
            value=float(s.speed),  # type: ignore[arg-type]
            label=s.date.strftime("%H:%M:%S"),  # type: ignore[union-attr]
            value_label=format_speed(s.speed),
            color=BRAKE_COLOR if s.is_braking else SPEED_COLOR,
        )
        for s in usable[:limit]
    ]


def latest_weather(readings: list[Weather]) -> Weather | None:
    """Most recent weather reading by date."""
    dated = [w for w in readings if w.date is not None]
    return max(dated, key=lambda w: w.date, default=None)  # type: ignore[arg-type, return-value]


def latest_positions(positions: list[Position]) -> list[Position]:
    """Last reported position per driver, ordered by position.

    Drivers without a reported position sort last.
    """
    latest: dict[int, Position] = {}
    for record in sorted(
        (p for p in positions if p.driver_number is not None and p.date is not None),
        key=lambda p: p.date,  # type: ignore[arg-type, return-value]
    ):
        latest[record.driver_number] = record  # type: ignore[index]
    return sorted(
        latest.values(),
        key=lambda p: p.position if p.position is not None else float("inf"),
    )

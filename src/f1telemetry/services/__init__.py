"""Service layer: pure aggregation and grouping over fetched records."""

from .aggregation import (
    ChartEntry,
    LapStatistics,
    SectorAverages,
    average_lap_time,
    fastest_lap,
    lap_chart_series,
    lap_statistics,
    latest_positions,
    latest_weather,
    sector_averages,
    sector_chart_series,
    telemetry_chart_series,
    timed_laps,
)
from .sessions import SessionGroup, filter_sessions, group_sessions, session_type_rank

__all__ = [
    "ChartEntry",
    "LapStatistics",
    "SectorAverages",
    "SessionGroup",
    "average_lap_time",
    "fastest_lap",
    "filter_sessions",
    "group_sessions",
    "lap_chart_series",
    "lap_statistics",
    "latest_positions",
    "latest_weather",
    "sector_averages",
    "sector_chart_series",
    "session_type_rank",
    "telemetry_chart_series",
    "timed_laps",
]

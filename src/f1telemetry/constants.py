"""Shared constants for the telemetry core."""

from __future__ import annotations

from datetime import timedelta

DEFAULT_BASE_URL = "https://api.openf1.org/v1"
DEFAULT_TIMEOUT = 30.0
MIN_REQUEST_INTERVAL = 0.35  # OpenF1 allows 3 req/s; 350ms keeps us safe

# OpenF1 has complete data from 2018 onwards
FIRST_SEASON = 2018

# ── Cache lifetimes ──────────────────────────────────────────────────────────

TELEMETRY_TTL = timedelta(minutes=1)
SESSION_TTL = timedelta(hours=1)
HISTORICAL_TTL = timedelta(days=1)
DRIVER_TTL = timedelta(days=7)

# ── Presentation bounds & colors ─────────────────────────────────────────────

TELEMETRY_WINDOW = 100

FILTER_ALL = "All"

F1_RED = "#E10600"
FASTEST_LAP_COLOR = "#BF00FF"
SPEED_COLOR = "#00D2BE"
BRAKE_COLOR = F1_RED
SECTOR_COLORS: tuple[str, str, str] = ("#FF8700", "#FFD700", "#00D2BE")
TEAM_COLOR_FALLBACK = "#808080"

MISSING_LAP_TIME = "--:--.---"
NOT_AVAILABLE = "N/A"

# Session type precedence inside a meeting; anything unmatched ranks last
SESSION_TYPE_ORDER: tuple[tuple[str, int], ...] = (
    ("practice", 1),
    ("qualifying", 2),
    ("sprint", 3),
    ("race", 4),
)
UNKNOWN_SESSION_RANK = 5

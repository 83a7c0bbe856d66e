"""f1telemetry: cached OpenF1 data access and telemetry aggregation."""

from f1telemetry._filters import Filter
from f1telemetry.app import F1TelemetryApp
from f1telemetry.client import AsyncOpenF1Client
from f1telemetry.config import Settings, get_settings
from f1telemetry.data import CachedRepository, LoadResult, OpenF1Gateway, TTLCache
from f1telemetry.exceptions import (
    CacheTypeMismatchError,
    F1DataError,
    OpenF1APIError,
    OpenF1ConnectionError,
    OpenF1Error,
    OpenF1TimeoutError,
    OpenF1ValidationError,
)

__all__ = [
    "AsyncOpenF1Client",
    "CacheTypeMismatchError",
    "CachedRepository",
    "F1DataError",
    "F1TelemetryApp",
    "Filter",
    "LoadResult",
    "OpenF1APIError",
    "OpenF1ConnectionError",
    "OpenF1Error",
    "OpenF1Gateway",
    "OpenF1TimeoutError",
    "OpenF1ValidationError",
    "Settings",
    "TTLCache",
    "get_settings",
]

__version__ = "0.1.0"

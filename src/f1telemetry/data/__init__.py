"""Data layer: shared cache, remote gateway and cache-aside repository."""

from __future__ import annotations

from ..exceptions import CacheTypeMismatchError, F1DataError
from .base import DataGateway
from .cache import CacheEntry, TTLCache
from .domains import Domain
from .gateway import OpenF1Gateway, RateLimiter
from .repository import CachedRepository, LoadResult

__all__ = [
    "CacheEntry",
    "CacheTypeMismatchError",
    "CachedRepository",
    "DataGateway",
    "Domain",
    "F1DataError",
    "LoadResult",
    "OpenF1Gateway",
    "RateLimiter",
    "TTLCache",
]

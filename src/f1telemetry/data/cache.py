"""In-memory key/value cache with per-entry absolute expiry."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Callable, TypeVar

from ..exceptions import CacheTypeMismatchError

T = TypeVar("T")


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at: float


def _ttl_seconds(ttl: timedelta | float) -> float:
    if isinstance(ttl, timedelta):
        return ttl.total_seconds()
    return float(ttl)


class TTLCache:
    """Thread-safe cache whose entries expire lazily on read.

    There is no background sweep: an expired entry is evicted only when
    ``get`` or ``exists`` touches it, or by ``remove``/``clear``. One instance
    is meant to be shared by every consumer in the process.

    The cache itself is type-agnostic. Callers that know what a key holds
    pass ``expected_type`` to ``get`` and get a ``CacheTypeMismatchError`` on
    the first read of a value stored under the wrong type.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._clock = clock

    def get(self, key: str, expected_type: type[T] | None = None) -> T | None:
        """Return the live value for *key*, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() >= entry.expires_at:
                del self._entries[key]
                return None
            value = entry.value
        if expected_type is not None and not isinstance(value, expected_type):
            raise CacheTypeMismatchError(key, expected_type, type(value))
        return value

    def set(self, key: str, value: Any, ttl: timedelta | float) -> None:
        """Store *value* under *key*, replacing any prior entry and its expiry."""
        expires_at = self._clock() + _ttl_seconds(ttl)
        with self._lock:
            self._entries[key] = CacheEntry(value=value, expires_at=expires_at)

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def exists(self, key: str) -> bool:
        """True if *key* holds a live entry; evicts it if expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False
            if self._clock() >= entry.expires_at:
                del self._entries[key]
                return False
            return True

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        """Number of stored entries, expired-but-unread ones included."""
        with self._lock:
            return len(self._entries)

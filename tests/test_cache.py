"""Tests for the TTL cache."""

from __future__ import annotations

import threading
from datetime import timedelta

import pytest

from f1telemetry.data.cache import TTLCache
from f1telemetry.exceptions import CacheTypeMismatchError, F1DataError


class TestTTLCache:
    def test_set_then_get(self, cache) -> None:
        cache.set("sessions_2024", ["a"], timedelta(hours=1))
        assert cache.get("sessions_2024") == ["a"]
        assert cache.exists("sessions_2024")

    def test_missing_key(self, cache) -> None:
        assert cache.get("nope") is None
        assert not cache.exists("nope")

    def test_expiry(self, cache, clock) -> None:
        cache.set("weather_9161", [1], timedelta(minutes=1))
        clock.advance(59.5)
        assert cache.get("weather_9161") == [1]
        clock.advance(0.5)
        assert cache.get("weather_9161") is None
        assert not cache.exists("weather_9161")

    def test_expired_entry_evicted_lazily(self, cache, clock) -> None:
        cache.set("k", "v", 10)
        clock.advance(11)
        assert len(cache) == 1
        assert not cache.exists("k")
        assert len(cache) == 0

    def test_set_overwrites_and_resets_expiry(self, cache, clock) -> None:
        cache.set("k", "old", 10)
        clock.advance(8)
        cache.set("k", "new", 10)
        clock.advance(8)
        assert cache.get("k") == "new"

    def test_ttl_as_seconds(self, cache, clock) -> None:
        cache.set("k", "v", 5.0)
        clock.advance(4.5)
        assert cache.exists("k")
        clock.advance(0.5)
        assert not cache.exists("k")

    def test_remove(self, cache) -> None:
        cache.set("a", 1, 60)
        cache.set("b", 2, 60)
        cache.remove("a")
        cache.remove("missing")
        assert cache.get("a") is None
        assert cache.get("b") == 2

    def test_clear(self, cache) -> None:
        cache.set("a", 1, 60)
        cache.set("b", 2, 60)
        cache.clear()
        assert len(cache) == 0
        assert cache.get("b") is None

    def test_expected_type_match(self, cache) -> None:
        cache.set("k", [1, 2], 60)
        assert cache.get("k", list) == [1, 2]

    def test_expected_type_mismatch(self, cache) -> None:
        cache.set("k", {"not": "a list"}, 60)
        with pytest.raises(CacheTypeMismatchError) as exc_info:
            cache.get("k", list)
        assert exc_info.value.key == "k"
        assert exc_info.value.expected is list
        assert exc_info.value.actual is dict
        assert isinstance(exc_info.value, F1DataError)

    def test_default_clock(self) -> None:
        cache = TTLCache()
        cache.set("k", "v", timedelta(hours=1))
        assert cache.get("k") == "v"

    def test_concurrent_writers(self, cache) -> None:
        def writer(n: int) -> None:
            for i in range(200):
                cache.set(f"k{n}_{i}", i, 60)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(cache) == 800

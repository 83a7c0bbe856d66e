"""Tests for lap time and telemetry formatting."""

from __future__ import annotations

import pytest

from f1telemetry.formatters import format_lap_time, format_seconds, format_speed


class TestFormatLapTime:
    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (89.876, "1:29.876"),
            (90.53667, "1:30.536"),
            (59.9999, "0:59.999"),
            (60.0, "1:00.000"),
            (125.004, "2:05.004"),
            (0.0, "0:00.000"),
        ],
    )
    def test_truncates(self, seconds, expected) -> None:
        assert format_lap_time(seconds) == expected

    def test_missing(self) -> None:
        assert format_lap_time(None) == "--:--.---"


class TestFormatSeconds:
    def test_three_decimals(self) -> None:
        assert format_seconds(28.5) == "28.500"

    def test_missing(self) -> None:
        assert format_seconds(None) == "--.---"


class TestFormatSpeed:
    def test_speed(self) -> None:
        assert format_speed(305) == "305 km/h"

    def test_missing(self) -> None:
        assert format_speed(None) == "-- km/h"

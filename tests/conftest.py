"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

import f1telemetry.api_logging as api_logging
from f1telemetry.data.base import DataGateway
from f1telemetry.data.cache import TTLCache
from f1telemetry.data.repository import CachedRepository
from f1telemetry.models import CarData, Lap, Meeting, Session

BASE_URL = "https://api.openf1.org/v1"


SAMPLE_DRIVER = {
    "broadcast_name": "M VERSTAPPEN",
    "country_code": "NED",
    "driver_number": 1,
    "first_name": "Max",
    "full_name": "Max VERSTAPPEN",
    "headshot_url": "https://example.com/ver.png",
    "last_name": "Verstappen",
    "meeting_key": 1219,
    "name_acronym": "VER",
    "session_key": 9161,
    "team_colour": "3671C6",
    "team_name": "Red Bull Racing",
}

SAMPLE_SESSION = {
    "circuit_key": 61,
    "circuit_short_name": "Bahrain",
    "country_code": "BHR",
    "country_key": 36,
    "country_name": "Bahrain",
    "date_end": "2023-03-05T17:02:48",
    "date_start": "2023-03-05T15:00:00",
    "gmt_offset": "03:00:00",
    "location": "Sakhir",
    "meeting_key": 1219,
    "session_key": 9161,
    "session_name": "Race",
    "session_type": "Race",
    "year": 2023,
}

SAMPLE_MEETING = {
    "circuit_key": 61,
    "circuit_short_name": "Bahrain",
    "country_code": "BHR",
    "country_key": 36,
    "country_name": "Bahrain",
    "date_start": "2023-03-03T11:30:00",
    "gmt_offset": "03:00:00",
    "location": "Sakhir",
    "meeting_key": 1219,
    "meeting_name": "Bahrain Grand Prix",
    "meeting_official_name": "FORMULA 1 GULF AIR BAHRAIN GRAND PRIX 2023",
    "year": 2023,
}

SAMPLE_LAP = {
    "date_start": "2023-03-05T15:10:00",
    "driver_number": 1,
    "duration_sector_1": 28.5,
    "duration_sector_2": 35.2,
    "duration_sector_3": 30.1,
    "i1_speed": 305.0,
    "i2_speed": 280.0,
    "is_pit_out_lap": False,
    "lap_duration": 93.8,
    "lap_number": 5,
    "meeting_key": 1219,
    "segments_sector_1": [2048, 2049, 2051],
    "segments_sector_2": [2048, 2049],
    "segments_sector_3": [2048, 2049, 2050],
    "session_key": 9161,
    "st_speed": 310.0,
}

SAMPLE_WEATHER = {
    "air_temperature": 30.5,
    "date": "2023-03-05T15:00:00",
    "humidity": 45.0,
    "meeting_key": 1219,
    "pressure": 1013.0,
    "rainfall": 0,
    "session_key": 9161,
    "track_temperature": 45.2,
    "wind_direction": 180,
    "wind_speed": 3.5,
}

SAMPLE_CAR_DATA = {
    "brake": 0,
    "date": "2023-03-05T15:10:00.100",
    "driver_number": 1,
    "drs": 12,
    "meeting_key": 1219,
    "n_gear": 7,
    "rpm": 10500,
    "session_key": 9161,
    "speed": 305,
    "throttle": 100,
}

SAMPLE_POSITION = {
    "date": "2023-03-05T15:05:00",
    "driver_number": 1,
    "meeting_key": 1219,
    "position": 1,
    "session_key": 9161,
}


# ── Model builders ───────────────────────────────────────────────────────────


def make_lap(
    lap_number: int,
    lap_duration: float | None = 93.0,
    s1: float | None = 28.0,
    s2: float | None = 35.0,
    s3: float | None = 30.0,
    date_start: datetime | None = None,
    driver_number: int = 1,
) -> Lap:
    return Lap(
        lap_number=lap_number,
        lap_duration=lap_duration,
        duration_sector_1=s1,
        duration_sector_2=s2,
        duration_sector_3=s3,
        date_start=date_start,
        driver_number=driver_number,
        session_key=9161,
    )


def make_session(
    session_key: int,
    session_type: str,
    date_start: datetime | None,
    session_name: str | None = None,
    meeting_key: int = 1229,
) -> Session:
    return Session(
        session_key=session_key,
        session_type=session_type,
        session_name=session_name or session_type,
        date_start=date_start,
        date_end=date_start + timedelta(hours=2) if date_start else None,
        meeting_key=meeting_key,
        location="Sakhir",
        circuit_short_name="Sakhir",
        country_name="Bahrain",
        year=2024,
    )


def make_meeting(meeting_key: int, date_start: datetime, name: str = "Bahrain Grand Prix") -> Meeting:
    return Meeting(
        meeting_key=meeting_key,
        meeting_name=name,
        date_start=date_start,
        location="Sakhir",
        circuit_short_name="Sakhir",
        country_name="Bahrain",
        year=date_start.year,
    )


def make_samples(count: int, start: datetime | None = None, brake_every: int = 0) -> list[CarData]:
    """*count* samples roughly 270 ms apart, in reverse timestamp order."""
    start = start or datetime(2024, 3, 2, 15, 0, 0)
    samples = [
        CarData(
            date=start + timedelta(milliseconds=270 * i),
            speed=200 + i % 100,
            brake=100 if brake_every and i % brake_every == 0 else 0,
            driver_number=1,
            session_key=9161,
        )
        for i in range(count)
    ]
    return list(reversed(samples))


# ── Fixtures ─────────────────────────────────────────────────────────────────


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> TTLCache:
    return TTLCache(clock=clock)


@pytest.fixture
def gateway() -> MagicMock:
    """DataGateway stand-in; every fetch is an AsyncMock returning nothing."""
    fake = MagicMock(spec=DataGateway)
    for name in (
        "fetch_sessions", "fetch_drivers", "fetch_laps", "fetch_car_data",
        "fetch_weather", "fetch_positions", "fetch_meetings",
    ):
        getattr(fake, name).return_value = []
    fake.fetch_session_by_key.return_value = None
    return fake


@pytest.fixture
def repo(gateway, cache) -> CachedRepository:
    return CachedRepository(gateway, cache)


@pytest.fixture(autouse=True)
def _log_to_tmp_path(tmp_path):
    """Redirect the api_calls.log file logger to tmp_path for every test."""
    named_logger = logging.getLogger(api_logging.LOGGER_NAME)
    old_dir = api_logging._LOG_DIR

    api_logging.configure_log_dir(str(tmp_path / "logs"))
    yield tmp_path / "logs"

    api_logging.configure_log_dir(old_dir)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)

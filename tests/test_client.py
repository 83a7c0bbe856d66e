"""Tests for the async OpenF1 client."""

from __future__ import annotations

from datetime import datetime

import httpx
import pytest
import respx

from f1telemetry import AsyncOpenF1Client, Filter
from f1telemetry.exceptions import OpenF1ValidationError
from f1telemetry.models import CarData, Driver, Lap, Meeting, Position, Session, Weather
from tests.conftest import (
    SAMPLE_CAR_DATA,
    SAMPLE_DRIVER,
    SAMPLE_LAP,
    SAMPLE_MEETING,
    SAMPLE_POSITION,
    SAMPLE_SESSION,
    SAMPLE_WEATHER,
)

BASE_URL = "https://api.openf1.org/v1"


class TestAsyncOpenF1Client:
    @respx.mock
    @pytest.mark.asyncio
    async def test_drivers(self) -> None:
        respx.get(f"{BASE_URL}/drivers").mock(
            return_value=httpx.Response(200, json=[SAMPLE_DRIVER])
        )
        async with AsyncOpenF1Client() as f1:
            drivers = await f1.drivers(session_key=9161)
        assert len(drivers) == 1
        assert isinstance(drivers[0], Driver)
        assert drivers[0].driver_number == 1

    @respx.mock
    @pytest.mark.asyncio
    async def test_sessions(self) -> None:
        respx.get(f"{BASE_URL}/sessions").mock(
            return_value=httpx.Response(200, json=[SAMPLE_SESSION])
        )
        async with AsyncOpenF1Client() as f1:
            sessions = await f1.sessions(year=2023)
        assert isinstance(sessions[0], Session)
        assert sessions[0].session_name == "Race"

    @respx.mock
    @pytest.mark.asyncio
    async def test_laps_with_filter(self) -> None:
        route = respx.get(f"{BASE_URL}/laps").mock(
            return_value=httpx.Response(200, json=[SAMPLE_LAP])
        )
        async with AsyncOpenF1Client() as f1:
            laps = await f1.laps(session_key=9161, lap_number=Filter(gte=1))
        assert isinstance(laps[0], Lap)
        assert ("lap_number>=", "1") in route.calls.last.request.url.params.multi_items()

    @respx.mock
    @pytest.mark.asyncio
    async def test_car_data_date_window(self) -> None:
        route = respx.get(f"{BASE_URL}/car_data").mock(
            return_value=httpx.Response(200, json=[SAMPLE_CAR_DATA])
        )
        async with AsyncOpenF1Client() as f1:
            samples = await f1.car_data(
                session_key=9161,
                driver_number=1,
                date=Filter(gte=datetime(2023, 3, 5, 15, 10), lte=datetime(2023, 3, 5, 15, 11)),
            )
        assert isinstance(samples[0], CarData)
        params = route.calls.last.request.url.params.multi_items()
        assert ("date>=", "2023-03-05T15:10:00") in params
        assert ("date<=", "2023-03-05T15:11:00") in params

    @respx.mock
    @pytest.mark.asyncio
    async def test_other_endpoints(self) -> None:
        respx.get(f"{BASE_URL}/weather").mock(return_value=httpx.Response(200, json=[SAMPLE_WEATHER]))
        respx.get(f"{BASE_URL}/position").mock(return_value=httpx.Response(200, json=[SAMPLE_POSITION]))
        respx.get(f"{BASE_URL}/meetings").mock(return_value=httpx.Response(200, json=[SAMPLE_MEETING]))
        async with AsyncOpenF1Client() as f1:
            assert isinstance((await f1.weather(session_key=9161))[0], Weather)
            assert isinstance((await f1.position(session_key=9161))[0], Position)
            assert isinstance((await f1.meetings(year=2023))[0], Meeting)

    @respx.mock
    @pytest.mark.asyncio
    async def test_empty_response(self) -> None:
        respx.get(f"{BASE_URL}/sessions").mock(return_value=httpx.Response(200, json=[]))
        async with AsyncOpenF1Client() as f1:
            sessions = await f1.sessions(year=9999)
        assert sessions == []

    @respx.mock
    @pytest.mark.asyncio
    async def test_validation_error(self) -> None:
        respx.get(f"{BASE_URL}/laps").mock(
            return_value=httpx.Response(200, json=[{"lap_number": "not a number"}])
        )
        async with AsyncOpenF1Client() as f1:
            with pytest.raises(OpenF1ValidationError, match="Lap"):
                await f1.laps(session_key=9161)

    @respx.mock
    @pytest.mark.asyncio
    async def test_custom_base_url(self) -> None:
        respx.get("https://example.test/v1/drivers").mock(
            return_value=httpx.Response(200, json=[SAMPLE_DRIVER])
        )
        async with AsyncOpenF1Client(base_url="https://example.test/v1") as f1:
            drivers = await f1.drivers(session_key=9161)
        assert len(drivers) == 1

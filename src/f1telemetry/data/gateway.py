"""OpenF1 API gateway implementation."""

from __future__ import annotations

import asyncio
import time
from datetime import datetime
from typing import Any, Awaitable, Callable, TypeVar

from .._filters import Filter
from ..api_logging import log_api_call
from ..client import AsyncOpenF1Client
from ..constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, MIN_REQUEST_INTERVAL
from ..exceptions import F1DataError
from ..models import CarData, Driver, Lap, Meeting, Position, Session, Weather
from .base import DataGateway

T = TypeVar("T")

# ── Rate limiting ────────────────────────────────────────────────────────────


class RateLimiter:
    """Spaces consecutive requests at least *min_interval* seconds apart."""

    def __init__(self, min_interval: float = MIN_REQUEST_INTERVAL) -> None:
        self._min_interval = min_interval
        self._last_request_time = float("-inf")
        self._lock = asyncio.Lock()

    async def wait(self) -> None:
        """Sleep if needed to respect the OpenF1 API rate limit."""
        async with self._lock:
            elapsed = time.monotonic() - self._last_request_time
            if elapsed < self._min_interval:
                await asyncio.sleep(self._min_interval - elapsed)
            self._last_request_time = time.monotonic()


# ── Gateway class ────────────────────────────────────────────────────────────


class OpenF1Gateway(DataGateway):
    """Fetches typed OpenF1 records, wrapping every failure in F1DataError."""

    def __init__(
        self,
        client: AsyncOpenF1Client | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        min_request_interval: float = MIN_REQUEST_INTERVAL,
    ) -> None:
        self._client = client or AsyncOpenF1Client(base_url=base_url, timeout=timeout)
        self._rate_limiter = RateLimiter(min_request_interval)

    async def close(self) -> None:
        await self._client.close()

    async def _fetch(
        self, what: str, endpoint: Callable[..., Awaitable[list[T]]], **params: Any,
    ) -> list[T]:
        await self._rate_limiter.wait()
        try:
            return await endpoint(**params)
        except Exception as exc:
            raise F1DataError(f"Failed to fetch {what}: {exc}") from exc

    @log_api_call
    async def fetch_sessions(self, year: int) -> list[Session]:
        return await self._fetch(f"sessions for {year}", self._client.sessions, year=year)

    @log_api_call
    async def fetch_session_by_key(self, session_key: int) -> Session | None:
        sessions = await self._fetch(
            f"session {session_key}", self._client.sessions, session_key=session_key,
        )
        return sessions[0] if sessions else None

    @log_api_call
    async def fetch_drivers(self, session_key: int) -> list[Driver]:
        return await self._fetch(
            f"drivers for session {session_key}", self._client.drivers, session_key=session_key,
        )

    @log_api_call
    async def fetch_laps(self, session_key: int, driver_number: int) -> list[Lap]:
        return await self._fetch(
            f"laps for driver {driver_number} in session {session_key}",
            self._client.laps,
            session_key=session_key,
            driver_number=driver_number,
        )

    @log_api_call
    async def fetch_car_data(
        self,
        session_key: int,
        driver_number: int,
        date_start: datetime | None = None,
        date_end: datetime | None = None,
    ) -> list[CarData]:
        window = None
        if date_start is not None or date_end is not None:
            window = Filter(gte=date_start, lte=date_end)
        return await self._fetch(
            f"car data for driver {driver_number} in session {session_key}",
            self._client.car_data,
            session_key=session_key,
            driver_number=driver_number,
            date=window,
        )

    @log_api_call
    async def fetch_weather(self, session_key: int) -> list[Weather]:
        return await self._fetch(
            f"weather for session {session_key}", self._client.weather, session_key=session_key,
        )

    @log_api_call
    async def fetch_positions(self, session_key: int) -> list[Position]:
        return await self._fetch(
            f"positions for session {session_key}", self._client.position, session_key=session_key,
        )

    @log_api_call
    async def fetch_meetings(self, year: int) -> list[Meeting]:
        return await self._fetch(f"meetings for {year}", self._client.meetings, year=year)

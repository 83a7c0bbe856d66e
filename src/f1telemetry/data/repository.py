"""Cache-aside access to OpenF1 data, one policy for every domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Awaitable, Callable, Generic, TypeVar

from ..api_logging import get_logger, log_service_call
from ..exceptions import CacheTypeMismatchError, F1DataError
from ..models import CarData, Driver, Lap, Meeting, Position, Session, Weather
from .base import DataGateway
from .cache import TTLCache
from .domains import Domain, lap_window_part

T = TypeVar("T")


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of a domain load: records plus a soft error message."""

    items: list[T] = field(default_factory=list)
    error: str | None = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def first(self) -> T | None:
        return self.items[0] if self.items else None


def _check_items(key: str, items: list, model: type) -> None:
    for item in items:
        if not isinstance(item, model):
            raise CacheTypeMismatchError(key, model, type(item))


class CachedRepository:
    """Read the shared cache, else fetch from the gateway and populate it.

    Non-empty results are cached under the domain's fixed lifetime. Empty
    results and gateway failures are never cached; both come back as an
    empty ``LoadResult`` with a message, so a later load retries.
    """

    def __init__(self, gateway: DataGateway, cache: TTLCache) -> None:
        self._gateway = gateway
        self._cache = cache

    @property
    def cache(self) -> TTLCache:
        return self._cache

    def invalidate(self, domain: Domain, *selector: int | str) -> None:
        """Drop the cached entry for one selector; other keys are untouched."""
        key = domain.key(*selector)
        self._cache.remove(key)
        get_logger().info("CACHE INVALIDATE: %s", key)

    async def _load(
        self,
        domain: Domain,
        selector: tuple[int | str, ...],
        model: type[T],
        fetch: Callable[[], Awaitable[list[T]]],
        description: str,
        force_refresh: bool = False,
    ) -> LoadResult[T]:
        logger = get_logger()
        key = domain.key(*selector)
        if force_refresh:
            self.invalidate(domain, *selector)

        cached = self._cache.get(key, list)
        if cached is not None:
            _check_items(key, cached, model)
            logger.debug("CACHE HIT: %s (%d items)", key, len(cached))
            return LoadResult(items=list(cached), from_cache=True)

        logger.info("CACHE MISS: %s", key)
        try:
            items = await fetch()
        except CacheTypeMismatchError:
            raise
        except F1DataError as exc:
            logger.warning("FETCH FAILED: %s -> %s", key, exc)
            return LoadResult(error=str(exc))

        if not items:
            logger.info("EMPTY RESULT: %s (not cached)", key)
            return LoadResult(error=f"No {domain.label} data found for {description}")

        self._cache.set(key, list(items), domain.ttl)
        logger.info("CACHE STORE: %s (%d items, ttl=%s)", key, len(items), domain.ttl)
        return LoadResult(items=list(items))

    # ── Domains ──────────────────────────────────────────────────────────────

    @log_service_call
    async def sessions(self, year: int, force_refresh: bool = False) -> LoadResult[Session]:
        return await self._load(
            Domain.SESSIONS, (year,), Session,
            lambda: self._gateway.fetch_sessions(year),
            str(year), force_refresh,
        )

    @log_service_call
    async def session(self, session_key: int, force_refresh: bool = False) -> LoadResult[Session]:
        async def fetch() -> list[Session]:
            found = await self._gateway.fetch_session_by_key(session_key)
            return [found] if found is not None else []

        return await self._load(
            Domain.SESSION, (session_key,), Session, fetch,
            f"session {session_key}", force_refresh,
        )

    @log_service_call
    async def drivers(self, session_key: int, force_refresh: bool = False) -> LoadResult[Driver]:
        return await self._load(
            Domain.DRIVERS, (session_key,), Driver,
            lambda: self._gateway.fetch_drivers(session_key),
            f"session {session_key}", force_refresh,
        )

    @log_service_call
    async def driver_roster(self, year: int, force_refresh: bool = False) -> LoadResult[Driver]:
        """Drivers of the most recent Race of *year*, kept for a week."""

        async def fetch() -> list[Driver]:
            sessions = await self.sessions(year)
            if not sessions.ok:
                raise F1DataError(sessions.error)
            races = [
                s for s in sessions.items
                if s.session_type == "Race" and s.date_start is not None and s.session_key is not None
            ]
            if not races:
                raise F1DataError(f"No race sessions found for {year}")
            latest = max(races, key=lambda s: s.date_start)  # type: ignore[arg-type, return-value]
            return await self._gateway.fetch_drivers(latest.session_key)  # type: ignore[arg-type]

        return await self._load(
            Domain.DRIVER_ROSTER, (year,), Driver, fetch, str(year), force_refresh,
        )

    @log_service_call
    async def laps(
        self, session_key: int, driver_number: int, force_refresh: bool = False,
    ) -> LoadResult[Lap]:
        return await self._load(
            Domain.LAPS, (session_key, driver_number), Lap,
            lambda: self._gateway.fetch_laps(session_key, driver_number),
            f"driver {driver_number} in session {session_key}", force_refresh,
        )

    @log_service_call
    async def car_data(
        self, session_key: int, driver_number: int, force_refresh: bool = False,
    ) -> LoadResult[CarData]:
        return await self._load(
            Domain.CAR_DATA, (session_key, driver_number), CarData,
            lambda: self._gateway.fetch_car_data(session_key, driver_number),
            f"driver {driver_number} in session {session_key}", force_refresh,
        )

    @log_service_call
    async def lap_car_data(
        self, session_key: int, driver_number: int, lap: Lap, force_refresh: bool = False,
    ) -> LoadResult[CarData]:
        """Car data restricted to the time window of one timed lap."""
        if lap.lap_number is None or lap.date_start is None or lap.date_end is None:
            raise ValueError("lap_car_data needs a lap with number, start and duration")
        return await self._load(
            Domain.CAR_DATA, (session_key, driver_number, lap_window_part(lap.lap_number)), CarData,
            lambda: self._gateway.fetch_car_data(
                session_key, driver_number, date_start=lap.date_start, date_end=lap.date_end,
            ),
            f"lap {lap.lap_number} of driver {driver_number} in session {session_key}",
            force_refresh,
        )

    @log_service_call
    async def weather(self, session_key: int, force_refresh: bool = False) -> LoadResult[Weather]:
        return await self._load(
            Domain.WEATHER, (session_key,), Weather,
            lambda: self._gateway.fetch_weather(session_key),
            f"session {session_key}", force_refresh,
        )

    @log_service_call
    async def positions(self, session_key: int, force_refresh: bool = False) -> LoadResult[Position]:
        return await self._load(
            Domain.POSITIONS, (session_key,), Position,
            lambda: self._gateway.fetch_positions(session_key),
            f"session {session_key}", force_refresh,
        )

    @log_service_call
    async def meetings(self, year: int, force_refresh: bool = False) -> LoadResult[Meeting]:
        return await self._load(
            Domain.MEETINGS, (year,), Meeting,
            lambda: self._gateway.fetch_meetings(year),
            str(year), force_refresh,
        )

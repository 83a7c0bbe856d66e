"""Abstract remote data gateway."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from ..models import CarData, Driver, Lap, Meeting, Position, Session, Weather


class DataGateway(ABC):
    """Source of truth for OpenF1 records.

    Implementations raise ``F1DataError`` for any failure (network, timeout,
    HTTP status, malformed payload); callers never see transport errors.
    """

    @abstractmethod
    async def fetch_sessions(self, year: int) -> list[Session]: ...

    @abstractmethod
    async def fetch_session_by_key(self, session_key: int) -> Session | None: ...

    @abstractmethod
    async def fetch_drivers(self, session_key: int) -> list[Driver]: ...

    @abstractmethod
    async def fetch_laps(self, session_key: int, driver_number: int) -> list[Lap]: ...

    @abstractmethod
    async def fetch_car_data(
        self,
        session_key: int,
        driver_number: int,
        date_start: datetime | None = None,
        date_end: datetime | None = None,
    ) -> list[CarData]: ...

    @abstractmethod
    async def fetch_weather(self, session_key: int) -> list[Weather]: ...

    @abstractmethod
    async def fetch_positions(self, session_key: int) -> list[Position]: ...

    @abstractmethod
    async def fetch_meetings(self, year: int) -> list[Meeting]: ...

    async def close(self) -> None:
        """Release transport resources; gateways without any need not override."""

"""Data domains: cache key construction and fixed lifetimes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum

from ..constants import DRIVER_TTL, HISTORICAL_TTL, SESSION_TTL, TELEMETRY_TTL


@dataclass(frozen=True)
class DomainPolicy:
    tag: str
    ttl: timedelta
    label: str


class Domain(Enum):
    """One category of remote resource and how long it stays cached."""

    SESSIONS = DomainPolicy("sessions", SESSION_TTL, "session")
    SESSION = DomainPolicy("session", SESSION_TTL, "session")
    DRIVERS = DomainPolicy("drivers", SESSION_TTL, "driver")
    DRIVER_ROSTER = DomainPolicy("drivers_list", DRIVER_TTL, "driver")
    LAPS = DomainPolicy("laps", SESSION_TTL, "lap")
    CAR_DATA = DomainPolicy("cardata", TELEMETRY_TTL, "telemetry")
    WEATHER = DomainPolicy("weather", TELEMETRY_TTL, "weather")
    POSITIONS = DomainPolicy("positions", HISTORICAL_TTL, "position")
    MEETINGS = DomainPolicy("meetings", SESSION_TTL, "meeting")

    @property
    def tag(self) -> str:
        return self.value.tag

    @property
    def ttl(self) -> timedelta:
        return self.value.ttl

    @property
    def label(self) -> str:
        return self.value.label

    def key(self, *selector: int | str) -> str:
        """Deterministic cache key, e.g. ``laps_9161_1``."""
        if not selector:
            raise ValueError(f"{self.name} needs a selector")
        return "_".join([self.tag, *(str(part) for part in selector)])


def lap_window_part(lap_number: int) -> str:
    """Selector part distinguishing a per-lap car data window from the full feed."""
    return f"lap{lap_number}"

"""OpenF1 record models consumed by the telemetry core."""

from f1telemetry.models.car_data import CarData
from f1telemetry.models.driver import Driver
from f1telemetry.models.lap import Lap
from f1telemetry.models.meeting import Meeting
from f1telemetry.models.position import Position
from f1telemetry.models.session import Session
from f1telemetry.models.weather import Weather

__all__ = [
    "CarData",
    "Driver",
    "Lap",
    "Meeting",
    "Position",
    "Session",
    "Weather",
]

"""View models consumed by a UI: per-view load/refresh with busy/error state."""

from .base import BaseView
from .driver_list import DriverListView
from .session_detail import SessionDetailView
from .session_list import SessionListView
from .telemetry import TelemetryView

__all__ = [
    "BaseView",
    "DriverListView",
    "SessionDetailView",
    "SessionListView",
    "TelemetryView",
]

"""Per-driver lap analysis and car telemetry for one session."""

from __future__ import annotations

from ..api_logging import get_logger, log_service_call
from ..constants import TELEMETRY_WINDOW
from ..data.repository import CachedRepository, LoadResult
from ..models import CarData, Driver, Lap
from ..services.aggregation import (
    ChartEntry,
    LapStatistics,
    SectorAverages,
    lap_chart_series,
    lap_statistics,
    sector_averages,
    sector_chart_series,
    telemetry_chart_series,
)
from .base import BaseView


def _has_window(lap: Lap) -> bool:
    return lap.lap_number is not None and lap.date_start is not None and lap.date_end is not None


class TelemetryView(BaseView):
    """Laps, lap/sector charts and a speed trace for one driver.

    ``load`` fetches driver info and laps; ``select_lap`` fetches car data.
    Laps with a start time and duration get telemetry for their own time
    window, other laps fall back to the start of the driver's session trace.
    """

    def __init__(
        self,
        repo: CachedRepository,
        session_key: int,
        driver_number: int,
        telemetry_window: int = TELEMETRY_WINDOW,
    ) -> None:
        super().__init__(repo, title="Telemetry")
        self.session_key = session_key
        self.driver_number = driver_number
        self.telemetry_window = telemetry_window

        self.driver: Driver | None = None
        self.laps: list[Lap] = []
        self.statistics: LapStatistics = lap_statistics([])
        self.sector_averages: SectorAverages | None = None
        self.lap_series: list[ChartEntry] = []
        self.sector_series: list[ChartEntry] = []

        self.selected_lap: Lap | None = None
        self.car_data: list[CarData] = []
        self.telemetry_series: list[ChartEntry] = []

    async def _load(self, force_refresh: bool) -> None:
        drivers = await self._repo.drivers(self.session_key, force_refresh=force_refresh)
        if not drivers.ok:
            get_logger().warning("TelemetryView: %s", drivers.error)
        self.driver = next(
            (d for d in drivers.items if d.driver_number == self.driver_number), None,
        )
        if self.driver is not None:
            self.title = f"{self.driver.broadcast_name} - Telemetry"

        laps = await self._repo.laps(
            self.session_key, self.driver_number, force_refresh=force_refresh,
        )
        if not laps.ok:
            self.set_error(laps.error or "")
        self.laps = sorted(
            laps.items,
            key=lambda lap: lap.lap_number if lap.lap_number is not None else float("inf"),
        )

        self.statistics = lap_statistics(self.laps)
        self.sector_averages = sector_averages(self.laps)
        if self.driver is not None:
            self.lap_series = lap_chart_series(self.laps, self.driver.team_color)
        else:
            self.lap_series = lap_chart_series(self.laps)
        self.sector_series = sector_chart_series(self.laps)
        self._notify("laps")

    @log_service_call
    async def select_lap(self, lap: Lap | None) -> bool:
        """Select *lap* and load its car telemetry; ignored while busy."""
        if lap is None:
            return False
        return await self._guarded(lambda: self._load_lap(lap))

    async def _load_lap(self, lap: Lap) -> None:
        self.selected_lap = lap
        self._notify("selected_lap")

        result: LoadResult[CarData]
        if _has_window(lap):
            result = await self._repo.lap_car_data(self.session_key, self.driver_number, lap)
        else:
            result = await self._repo.car_data(self.session_key, self.driver_number)
        if not result.ok:
            self.set_error(result.error or "")

        ordered = sorted(
            (s for s in result.items if s.date is not None),
            key=lambda s: s.date,  # type: ignore[arg-type, return-value]
        )
        self.car_data = ordered[: self.telemetry_window]
        self.telemetry_series = telemetry_chart_series(result.items, self.telemetry_window)
        self._notify("car_data")

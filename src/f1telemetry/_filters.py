"""Query parameter building for OpenF1 comparison filters."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

FilterValue = int | float | str | datetime | None


def format_param(value: Any) -> str:
    """Render one query value the way OpenF1 expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


@dataclass(frozen=True)
class Filter:
    """Comparison filter for a single query parameter.

    Usage:
        Filter(gte=5, lte=10)  # lap_number>=5&lap_number<=10
        Filter(gte=lap_start, lt=lap_end)  # date window for car_data
    """

    gt: FilterValue = None
    gte: FilterValue = None
    lt: FilterValue = None
    lte: FilterValue = None

    def to_params(self, key: str) -> list[tuple[str, str]]:
        """Convert this filter to (key_with_operator, value) pairs."""
        params: list[tuple[str, str]] = []
        for op, bound in ((">", self.gt), (">=", self.gte), ("<", self.lt), ("<=", self.lte)):
            if bound is not None:
                params.append((f"{key}{op}", format_param(bound)))
        return params


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build query parameter tuples from keyword arguments.

    Plain values become equality filters, Filter instances become comparisons
    and None values are dropped.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, Filter):
            params.extend(value.to_params(key))
        else:
            params.append((key, format_param(value)))
    return params

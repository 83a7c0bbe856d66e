"""Runtime settings for the telemetry core.

Defaults live on the model; ``F1TELEMETRY_*`` environment variables override
them. Cache lifetimes are fixed per data domain and are not settings.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    FIRST_SEASON,
    MIN_REQUEST_INTERVAL,
    TELEMETRY_WINDOW,
)

_ENV_PREFIX = "F1TELEMETRY_"


class Settings(BaseModel):
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    min_request_interval: float = Field(default=MIN_REQUEST_INTERVAL, ge=0)
    log_dir: str = Field(default_factory=lambda: os.path.join(os.getcwd(), "logs"))
    telemetry_window: int = Field(default=TELEMETRY_WINDOW, gt=0)
    first_season: int = Field(default=FIRST_SEASON)


def get_settings() -> Settings:
    """Build settings from defaults plus environment overrides."""
    overrides: dict[str, str] = {}
    for name in Settings.model_fields:
        value = os.environ.get(f"{_ENV_PREFIX}{name.upper()}")
        if value:
            overrides[name] = value
    return Settings.model_validate(overrides)

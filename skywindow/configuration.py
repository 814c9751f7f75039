"""Mini README: Centralised configuration models and helpers for SkyWindow.

Structure:
    * SkyWindowSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    The CLI and the HTTP interface call ``get_settings`` to read environment
    variables (prefix ``SKYWINDOW_``) and build their route engine from the
    policy values below. Library callers that never touch the environment
    can ignore this module and rely on the constants in
    ``skywindow.route_planning``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

from .route_planning.planner import (
    DEFAULT_CRUISE_SPEED_KT,
    TAXI_ALLOWANCE_MINUTES,
    VISIBILITY_CORRIDOR_KM,
)
from .alerts.window import ALERT_LEAD_MINUTES


class SkyWindowSettings(BaseSettings):
    """Runtime configuration for the SkyWindow services."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied by the CLI and web interface.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    taxi_allowance_minutes: float = Field(
        TAXI_ALLOWANCE_MINUTES,
        description="Ground time subtracted from the scheduled block before estimating airborne time.",
        ge=0,
    )
    visibility_corridor_km: float = Field(
        VISIBILITY_CORRIDOR_KM,
        description="Maximum perpendicular offset at which a landmark counts as visible.",
        gt=0,
    )
    default_cruise_speed_kt: int = Field(
        DEFAULT_CRUISE_SPEED_KT,
        description="Cruise speed assumed for aircraft types missing from the speed table.",
        gt=0,
    )
    alert_lead_minutes: float = Field(
        ALERT_LEAD_MINUTES,
        description="How long before a landmark's ETA the 'look now' alert opens.",
        ge=0,
    )

    class Config:
        env_prefix = "SKYWINDOW_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: str) -> str:
        """Accept any casing for level names."""

        return str(value).strip().upper()


@lru_cache()
def get_settings() -> SkyWindowSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return SkyWindowSettings()

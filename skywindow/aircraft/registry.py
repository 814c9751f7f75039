"""Mini README: Cruise speed lookup keyed by aircraft type code.

Structure:
    * DEFAULT_CRUISE_SPEEDS_KT - published cruise speeds for common airliners.
    * CruiseSpeedRegistry - case-insensitive table with a fallback speed.
    * REGISTRY - shared registry seeded with the defaults.

The speeds are policy values rather than geometry, so they live apart from
the route engine and can be extended at runtime (e.g. a content pack
introducing a regional type) without touching the planning code.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DEFAULT_SPEED_KT = 450

DEFAULT_CRUISE_SPEEDS_KT: Mapping[str, int] = {
    "B737": 450,
    "A320": 447,
    "B777": 490,
    "A350": 488,
    "B787": 487,
    "A380": 490,
    "B747": 493,
    "A330": 470,
    "E190": 430,
    "CRJ9": 420,
    "B757": 460,
    "A321": 447,
}


class CruiseSpeedRegistry:
    """Map aircraft type codes to cruise speeds in knots."""

    def __init__(
        self,
        speeds: Optional[Mapping[str, int]] = None,
        *,
        default_speed_kt: int = DEFAULT_SPEED_KT,
    ) -> None:
        if default_speed_kt <= 0:
            raise ValueError("Default cruise speed must be positive")
        self.default_speed_kt = default_speed_kt
        self._speeds: Dict[str, int] = {}
        for code, knots in (speeds if speeds is not None else DEFAULT_CRUISE_SPEEDS_KT).items():
            self.register(code, knots)

    def register(self, aircraft_type: str, knots: int) -> None:
        """Add or replace the cruise speed for an aircraft type."""

        if knots <= 0:
            raise ValueError(f"Cruise speed for '{aircraft_type}' must be positive")
        identifier = aircraft_type.strip().upper()
        LOGGER.debug("Registering cruise speed %s kt for '%s'", knots, identifier)
        self._speeds[identifier] = int(knots)

    def available_types(self) -> Iterable[str]:
        """Return registered type codes for display."""

        return sorted(self._speeds.keys())

    def cruise_speed(self, aircraft_type: str) -> int:
        """Return the cruise speed for ``aircraft_type``, falling back to the default."""

        speed = self._speeds.get(aircraft_type.strip().upper())
        if speed is None:
            LOGGER.debug(
                "Unknown aircraft type '%s', assuming %s kt", aircraft_type, self.default_speed_kt
            )
            return self.default_speed_kt
        return speed


REGISTRY = CruiseSpeedRegistry()

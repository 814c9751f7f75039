"""Mini README: Aircraft performance lookups.

Re-exports the cruise speed registry used by route planning to report the
expected cruise speed of a flight.
"""

from .registry import (
    DEFAULT_CRUISE_SPEEDS_KT,
    DEFAULT_SPEED_KT,
    REGISTRY,
    CruiseSpeedRegistry,
)

__all__ = [
    "CruiseSpeedRegistry",
    "DEFAULT_CRUISE_SPEEDS_KT",
    "DEFAULT_SPEED_KT",
    "REGISTRY",
]

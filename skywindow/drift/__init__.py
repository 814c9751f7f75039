"""Mini README: Schedule drift reconciliation.

Exports the ``DriftReconciler`` session object and the plain records it
returns. Construct one reconciler per flight and hand it to whatever drives
the timeline. No shared module-level instance exists.
"""

from .reconciler import (
    DriftAdjustment,
    DriftPhase,
    DriftReconciler,
    DriftStats,
    FlightProgress,
    adjustment_factor,
)

__all__ = [
    "DriftAdjustment",
    "DriftPhase",
    "DriftReconciler",
    "DriftStats",
    "FlightProgress",
    "adjustment_factor",
]

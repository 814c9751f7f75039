"""Mini README: Schedule drift reconciliation for a single flight session.

Structure:
    * DriftPhase - lifecycle of a session (uninitialized, initialized, in flight).
    * DriftAdjustment - departure delay, in-flight offset and manual correction.
    * FlightProgress - elapsed/remaining minutes plus a confidence estimate.
    * DriftStats - dashboard summary including an estimated arrival time.
    * DriftReconciler - owns the session state and rescales landmark ETAs.

A reconciler is constructed and owned by whoever drives the flight (the web
app, a timer loop, a test). It never raises: queries before a schedule is
loaded or before takeoff return neutral values because the UI may poll at
any time. All calls go through one re-entrant lock so a periodic tick and a
user action cannot interleave mid-update.
"""

from __future__ import annotations

import math
import threading
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from ..logging_utils import get_logger
from ..route_planning.planner import LandmarkEvent
from ..timestamps import minutes_between as _minutes_between
from ..timestamps import utc_now as _utc_now

LOGGER = get_logger(__name__)

MIN_ADJUSTMENT_FACTOR = 0.8
MAX_ADJUSTMENT_FACTOR = 1.2
OFFSET_DAMPING_MINUTES = 200.0
BASE_CONFIDENCE = 0.3
MAX_CONFIDENCE = 0.95
MINUTES_PER_LANDMARK = 2

Clock = Callable[[], datetime]


class DriftPhase(str, Enum):
    """Lifecycle states of a drift session."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    IN_FLIGHT = "in_flight"


@dataclass(frozen=True, slots=True)
class DriftAdjustment:
    """Minutes by which the real flight differs from its schedule."""

    departure_delay: float = 0.0
    current_offset: float = 0.0
    user_adjustment: float = 0.0

    @property
    def total_offset(self) -> float:
        return self.departure_delay + self.current_offset + self.user_adjustment

    def as_dict(self) -> Dict[str, float]:
        return {
            "departure_delay": self.departure_delay,
            "current_offset": self.current_offset,
            "user_adjustment": self.user_adjustment,
        }


@dataclass(frozen=True, slots=True)
class FlightProgress:
    """Elapsed and remaining flight time with a 0-1 confidence."""

    scheduled_elapsed: float = 0.0
    actual_elapsed: float = 0.0
    estimated_remaining: float = 0.0
    confidence: float = 0.0

    def as_dict(self) -> Dict[str, float]:
        return {
            "scheduled_elapsed": self.scheduled_elapsed,
            "actual_elapsed": self.actual_elapsed,
            "estimated_remaining": self.estimated_remaining,
            "confidence": self.confidence,
        }


@dataclass(frozen=True, slots=True)
class DriftStats:
    """Summary shown on the parental dashboard."""

    departure_delay: float
    current_drift: float
    manual_adjustment: float
    estimated_arrival: Optional[datetime]

    def as_dict(self) -> Dict[str, object]:
        return {
            "departure_delay": self.departure_delay,
            "current_drift": self.current_drift,
            "manual_adjustment": self.manual_adjustment,
            "estimated_arrival": (
                self.estimated_arrival.isoformat() if self.estimated_arrival else None
            ),
        }


def adjustment_factor(drift: DriftAdjustment) -> float:
    """Damped rescaling of the remaining timeline, limited to +/-20%."""

    factor = 1.0 + drift.current_offset / OFFSET_DAMPING_MINUTES
    return max(MIN_ADJUSTMENT_FACTOR, min(MAX_ADJUSTMENT_FACTOR, factor))


class DriftReconciler:
    """Track one flight's divergence from its schedule and correct ETAs."""

    def __init__(self, *, clock: Optional[Clock] = None) -> None:
        self._clock: Clock = clock or _utc_now
        self._lock = threading.RLock()
        self._scheduled_departure: Optional[datetime] = None
        self._scheduled_arrival: Optional[datetime] = None
        self._actual_departure: Optional[datetime] = None
        self._manual_offset = 0.0
        self._departure_delay = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    @property
    def phase(self) -> DriftPhase:
        with self._lock:
            if self._scheduled_departure is None or self._scheduled_arrival is None:
                return DriftPhase.UNINITIALIZED
            if self._actual_departure is None:
                return DriftPhase.INITIALIZED
            return DriftPhase.IN_FLIGHT

    @property
    def actual_departure(self) -> Optional[datetime]:
        with self._lock:
            return self._actual_departure

    def initialize(self, scheduled_departure: datetime, scheduled_arrival: datetime) -> None:
        """Load a schedule, discarding any previous session."""

        with self._lock:
            self._scheduled_departure = scheduled_departure
            self._scheduled_arrival = scheduled_arrival
            self._actual_departure = None
            self._manual_offset = 0.0
            self._departure_delay = 0.0
            LOGGER.info(
                "Drift session initialised for %s -> %s",
                scheduled_departure.isoformat(),
                scheduled_arrival.isoformat(),
            )

    def start_flight(self, actual_departure_time: Optional[datetime] = None) -> None:
        """Record takeoff and the resulting departure delay."""

        with self._lock:
            if self._scheduled_departure is None:
                LOGGER.warning("start_flight called before a schedule was loaded; ignoring")
                return
            self._actual_departure = actual_departure_time or self._clock()
            self._departure_delay = _minutes_between(
                self._actual_departure, self._scheduled_departure
            )
            LOGGER.info(
                "Flight started at %s (departure delay %.1f min)",
                self._actual_departure.isoformat(),
                self._departure_delay,
            )

    def apply_manual_adjustment(self, minutes: float) -> None:
        """Replace the manual correction with ``minutes``."""

        with self._lock:
            if self._scheduled_departure is None:
                LOGGER.warning("Manual adjustment before a schedule was loaded; ignoring")
                return
            self._manual_offset = float(minutes)
            LOGGER.info("Manual timeline adjustment set to %.1f min", self._manual_offset)

    def reset(self) -> None:
        """Forget the current flight entirely."""

        with self._lock:
            self._scheduled_departure = None
            self._scheduled_arrival = None
            self._actual_departure = None
            self._manual_offset = 0.0
            self._departure_delay = 0.0
            LOGGER.info("Drift session reset")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def _in_flight(self) -> bool:
        return (
            self._actual_departure is not None
            and self._scheduled_departure is not None
            and self._scheduled_arrival is not None
        )

    def _current_offset(self, now: datetime) -> float:
        if not self._in_flight():
            return 0.0
        actual_elapsed = _minutes_between(now, self._actual_departure)
        scheduled_elapsed = _minutes_between(now, self._scheduled_departure)
        return actual_elapsed - scheduled_elapsed

    def get_current_drift(self) -> DriftAdjustment:
        """Return the departure delay, in-flight offset and manual correction."""

        with self._lock:
            return DriftAdjustment(
                departure_delay=self._departure_delay,
                current_offset=self._current_offset(self._clock()),
                user_adjustment=self._manual_offset,
            )

    def adjust_timeline(
        self,
        events: Iterable[LandmarkEvent],
        drift: Optional[DriftAdjustment] = None,
    ) -> List[LandmarkEvent]:
        """Return new events with ETAs shifted and rescaled for drift."""

        with self._lock:
            if drift is None:
                drift = self.get_current_drift()
        factor = adjustment_factor(drift)
        total_offset = drift.total_offset
        user_adjusted = drift.user_adjustment != 0
        return [
            replace(
                event,
                eta_minutes=(event.eta_minutes + total_offset) * factor,
                user_adjusted=user_adjusted,
            )
            for event in events
        ]

    def get_flight_progress(self) -> FlightProgress:
        """Estimate elapsed and remaining time for the flight in progress."""

        with self._lock:
            if not self._in_flight():
                return FlightProgress()

            now = self._clock()
            # a takeoff recorded in the future counts as not yet elapsed
            actual_elapsed = max(0.0, _minutes_between(now, self._actual_departure))
            scheduled_elapsed = _minutes_between(now, self._scheduled_departure)
            current_offset = self._current_offset(now)
            total_scheduled = _minutes_between(
                self._scheduled_arrival, self._scheduled_departure
            )

            drift = DriftAdjustment(
                departure_delay=self._departure_delay,
                current_offset=current_offset,
                user_adjustment=self._manual_offset,
            )
            adjusted_total = total_scheduled * adjustment_factor(drift)
            estimated_remaining = max(0.0, adjusted_total - actual_elapsed)

            progress_ratio = actual_elapsed / total_scheduled if total_scheduled > 0 else 1.0
            confidence = min(MAX_CONFIDENCE, BASE_CONFIDENCE + progress_ratio * 0.65)

            return FlightProgress(
                scheduled_elapsed=scheduled_elapsed,
                actual_elapsed=actual_elapsed,
                estimated_remaining=estimated_remaining,
                confidence=confidence,
            )

    def suggest_timeline_adjustment(
        self, landmarks_passed: int, total_landmarks: int
    ) -> float:
        """Advise a manual correction from landmark progress versus time progress.

        Positive when the passenger is ahead of the predicted sightings,
        negative when behind. Advisory only; state is left untouched.
        """

        progress = self.get_flight_progress()
        if progress.confidence < BASE_CONFIDENCE or total_landmarks <= 0:
            return 0.0
        horizon = progress.actual_elapsed + progress.estimated_remaining
        if horizon <= 0:
            return 0.0
        expected = math.floor(total_landmarks * (progress.actual_elapsed / horizon))
        return float((landmarks_passed - expected) * MINUTES_PER_LANDMARK)

    def get_stats(self) -> DriftStats:
        """Summarise drift and the estimated arrival for dashboards."""

        with self._lock:
            drift = self.get_current_drift()
            progress = self.get_flight_progress()
            estimated_arrival = None
            if self._actual_departure is not None:
                estimated_arrival = self._actual_departure + timedelta(
                    minutes=progress.actual_elapsed + progress.estimated_remaining
                )
            return DriftStats(
                departure_delay=drift.departure_delay,
                current_drift=drift.current_offset,
                manual_adjustment=drift.user_adjustment,
                estimated_arrival=estimated_arrival,
            )

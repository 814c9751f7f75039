"""Mini README: "Look now" timing helpers for window alerts.

Structure:
    * alert_delay_seconds - when to fire an alert relative to takeoff.
    * events_in_view - events whose ETA is close to the current minute.
    * next_event - the next landmark still ahead of the aircraft.

These helpers only decide timing; delivering notifications or speaking the
alert is the job of the host application.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..route_planning.planner import LandmarkEvent

ALERT_LEAD_MINUTES = 5.0
MIN_ALERT_DELAY_SECONDS = 10.0


def alert_delay_seconds(
    event: LandmarkEvent, lead_minutes: float = ALERT_LEAD_MINUTES
) -> float:
    """Seconds after takeoff at which to warn about ``event``."""

    return max((event.eta_minutes - lead_minutes) * 60.0, MIN_ALERT_DELAY_SECONDS)


def events_in_view(
    events: Iterable[LandmarkEvent],
    elapsed_minutes: float,
    window_minutes: float = ALERT_LEAD_MINUTES,
) -> List[LandmarkEvent]:
    """Return events within ``window_minutes`` of now, preserving order."""

    return [
        event for event in events if abs(elapsed_minutes - event.eta_minutes) <= window_minutes
    ]


def next_event(
    events: Iterable[LandmarkEvent], elapsed_minutes: float
) -> Optional[LandmarkEvent]:
    """Return the first event not yet passed, or ``None``."""

    for event in events:
        if event.eta_minutes >= elapsed_minutes:
            return event
    return None

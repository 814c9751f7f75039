"""Mini README: Alert timing for upcoming landmark sightings."""

from .window import (
    ALERT_LEAD_MINUTES,
    MIN_ALERT_DELAY_SECONDS,
    alert_delay_seconds,
    events_in_view,
    next_event,
)

__all__ = [
    "ALERT_LEAD_MINUTES",
    "MIN_ALERT_DELAY_SECONDS",
    "alert_delay_seconds",
    "events_in_view",
    "next_event",
]

"""Mini README: Route planning and landmark sighting predictions.

Structure:
    * LandmarkCategory / Side - string enums used in catalog and event payloads.
    * Landmark - catalog entry describing something worth looking at.
    * RouteMetrics - airborne time, distance and cruise speed for a flight.
    * LandmarkEvent - predicted sighting of a landmark along the route.
    * plan_route - derive RouteMetrics from endpoints and a schedule.
    * annotate_landmarks - filter landmarks to the visibility corridor and
      order them by predicted time of sighting.
    * RouteEngine - immutable holder of policy overrides delegating to the
      functions above.

Both operations are pure. Landmarks outside the corridor, behind the origin
or beyond the destination are dropped silently; that is ordinary filtering,
not an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from ..aircraft import REGISTRY, CruiseSpeedRegistry
from ..aircraft.registry import DEFAULT_SPEED_KT
from ..logging_utils import get_logger
from ..timestamps import minutes_between
from .geodesy import (
    KM_TO_NM,
    Coordinate,
    along_track_distance,
    cross_track_distance,
    haversine_distance,
)

LOGGER = get_logger(__name__)

TAXI_ALLOWANCE_MINUTES = 25.0
MIN_AIRBORNE_MINUTES = 10.0
VISIBILITY_CORRIDOR_KM = 80.0
DEFAULT_CRUISE_SPEED_KT = DEFAULT_SPEED_KT


class LandmarkCategory(str, Enum):
    """Kinds of landmark found in content packs."""

    NATURAL = "natural"
    CITY = "city"
    STRUCTURE = "structure"
    WATER = "water"

    @classmethod
    def from_str(cls, value: str) -> "LandmarkCategory":
        """Coerce arbitrary casing into a valid category."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported landmark category: {value}") from error


class Side(str, Enum):
    """Side of the aircraft a landmark appears on."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Landmark:
    """Read-only catalog entry."""

    name: str
    coordinate: Coordinate
    landmark_id: str = ""
    category: LandmarkCategory = LandmarkCategory.CITY
    description: str = ""
    child_facts: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RouteMetrics:
    """Flight-level figures derived once per planned route."""

    airborne_minutes: float
    distance_nm: float
    cruise_speed_kt: int


@dataclass(frozen=True, slots=True)
class LandmarkEvent:
    """Predicted sighting of a landmark, ``eta_minutes`` after takeoff."""

    landmark: Landmark
    eta_minutes: float
    side: Side
    along_track_km: float
    cross_track_km: float
    user_adjusted: bool = False

    def as_dict(self) -> dict:
        """Export the event with serialisable values."""

        return {
            "landmark": {
                "id": self.landmark.landmark_id,
                "name": self.landmark.name,
                "lat": self.landmark.coordinate.latitude,
                "lon": self.landmark.coordinate.longitude,
                "category": self.landmark.category.value,
            },
            "eta_minutes": self.eta_minutes,
            "side": self.side.value,
            "along_track_km": self.along_track_km,
            "cross_track_km": self.cross_track_km,
            "user_adjusted": self.user_adjusted,
        }


def plan_route(
    origin: Coordinate,
    destination: Coordinate,
    scheduled_departure: datetime,
    scheduled_arrival: datetime,
    aircraft_type: str,
    *,
    taxi_allowance_minutes: float = TAXI_ALLOWANCE_MINUTES,
    speeds: Optional[CruiseSpeedRegistry] = None,
) -> RouteMetrics:
    """Derive airborne time, great-circle distance and cruise speed."""

    distance_km = haversine_distance(
        origin.latitude, origin.longitude, destination.latitude, destination.longitude
    )
    block_minutes = minutes_between(scheduled_arrival, scheduled_departure)
    airborne_minutes = max(block_minutes - taxi_allowance_minutes, MIN_AIRBORNE_MINUTES)
    cruise_speed_kt = (speeds or REGISTRY).cruise_speed(aircraft_type)

    metrics = RouteMetrics(
        airborne_minutes=airborne_minutes,
        distance_nm=distance_km * KM_TO_NM,
        cruise_speed_kt=cruise_speed_kt,
    )
    LOGGER.info(
        "Planned route %.1f nm, %.0f min airborne at %s kt (%s)",
        metrics.distance_nm,
        metrics.airborne_minutes,
        metrics.cruise_speed_kt,
        aircraft_type,
    )
    return metrics


def annotate_landmarks(
    route: RouteMetrics,
    origin: Coordinate,
    destination: Coordinate,
    landmarks: Iterable[Landmark],
    *,
    corridor_km: float = VISIBILITY_CORRIDOR_KM,
) -> List[LandmarkEvent]:
    """Return sighting events for landmarks visible from the route, soonest first."""

    total_distance = haversine_distance(
        origin.latitude, origin.longitude, destination.latitude, destination.longitude
    )
    events: List[LandmarkEvent] = []
    for landmark in landmarks:
        cross_track = cross_track_distance(landmark.coordinate, origin, destination)
        if abs(cross_track) > corridor_km:
            LOGGER.debug(
                "Dropping %s: %.1f km off track exceeds %.1f km corridor",
                landmark.name,
                abs(cross_track),
                corridor_km,
            )
            continue

        along_track = along_track_distance(landmark.coordinate, origin, destination)
        if not 0.0 <= along_track <= total_distance:
            LOGGER.debug(
                "Dropping %s: %.1f km along track is outside the route", landmark.name, along_track
            )
            continue

        progress = along_track / total_distance if total_distance > 0 else 0.0
        events.append(
            LandmarkEvent(
                landmark=landmark,
                eta_minutes=route.airborne_minutes * progress,
                side=Side.RIGHT if cross_track > 0 else Side.LEFT,
                along_track_km=along_track,
                cross_track_km=abs(cross_track),
            )
        )

    # sorted() is stable, so equal ETAs keep catalog order
    events = sorted(events, key=lambda event: event.eta_minutes)
    LOGGER.info("Annotated %s landmark events along the route", len(events))
    return events


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteEngine:
    """Route planning with overridable policy values."""

    taxi_allowance_minutes: float = TAXI_ALLOWANCE_MINUTES
    corridor_km: float = VISIBILITY_CORRIDOR_KM
    speeds: CruiseSpeedRegistry = field(default_factory=lambda: REGISTRY)

    @classmethod
    def from_settings(cls, settings) -> "RouteEngine":
        """Build an engine from a ``SkyWindowSettings`` instance."""

        speeds = CruiseSpeedRegistry(default_speed_kt=settings.default_cruise_speed_kt)
        return cls(
            taxi_allowance_minutes=settings.taxi_allowance_minutes,
            corridor_km=settings.visibility_corridor_km,
            speeds=speeds,
        )

    def plan_route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        scheduled_departure: datetime,
        scheduled_arrival: datetime,
        aircraft_type: str,
    ) -> RouteMetrics:
        return plan_route(
            origin,
            destination,
            scheduled_departure,
            scheduled_arrival,
            aircraft_type,
            taxi_allowance_minutes=self.taxi_allowance_minutes,
            speeds=self.speeds,
        )

    def annotate_landmarks(
        self,
        route: RouteMetrics,
        origin: Coordinate,
        destination: Coordinate,
        landmarks: Iterable[Landmark],
    ) -> List[LandmarkEvent]:
        return annotate_landmarks(
            route, origin, destination, landmarks, corridor_km=self.corridor_km
        )

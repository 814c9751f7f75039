"""Mini README: Route planning subsystem (great-circle geometry and landmarks).

``geodesy`` holds the spherical trigonometry, ``planner`` turns a schedule
and a landmark catalog into ordered sighting events. Everything here is
stateless and safe to call from any thread.
"""

from .geodesy import (
    EARTH_RADIUS_KM,
    KM_TO_NM,
    Coordinate,
    along_track_distance,
    cross_track_distance,
    haversine_distance,
    initial_bearing,
)
from .planner import (
    DEFAULT_CRUISE_SPEED_KT,
    MIN_AIRBORNE_MINUTES,
    TAXI_ALLOWANCE_MINUTES,
    VISIBILITY_CORRIDOR_KM,
    Landmark,
    LandmarkCategory,
    LandmarkEvent,
    RouteEngine,
    RouteMetrics,
    Side,
    annotate_landmarks,
    plan_route,
)

__all__ = [
    "Coordinate",
    "DEFAULT_CRUISE_SPEED_KT",
    "EARTH_RADIUS_KM",
    "KM_TO_NM",
    "Landmark",
    "LandmarkCategory",
    "LandmarkEvent",
    "MIN_AIRBORNE_MINUTES",
    "RouteEngine",
    "RouteMetrics",
    "Side",
    "TAXI_ALLOWANCE_MINUTES",
    "VISIBILITY_CORRIDOR_KM",
    "along_track_distance",
    "annotate_landmarks",
    "cross_track_distance",
    "haversine_distance",
    "initial_bearing",
    "plan_route",
]

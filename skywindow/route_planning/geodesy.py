"""Mini README: Great-circle geometry on a spherical Earth.

Structure:
    * Coordinate - immutable latitude/longitude pair in degrees.
    * haversine_distance - great-circle distance in kilometres.
    * initial_bearing - forward azimuth in degrees clockwise from north.
    * cross_track_distance - signed perpendicular offset from a track.
    * along_track_distance - signed distance travelled along a track.

Every function is pure and total: degenerate inputs (identical points,
zero-length tracks) return well-defined numbers, and arguments to ``sqrt``
and ``asin`` are clamped so floating-point overshoot never produces NaN.
Distances use a mean Earth radius of 6371 km.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0
KM_TO_NM = 0.539957


@dataclass(frozen=True, slots=True)
class Coordinate:
    """WGS-84 position in decimal degrees (no altitude)."""

    latitude: float
    longitude: float


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the great-circle distance between two points in kilometres."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    a = _clamp(a, 0.0, 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def initial_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the forward azimuth from point 1 to point 2 in ``[0, 360)``."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lon2 - lon1)

    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(
        delta_lambda
    )
    bearing = (math.degrees(math.atan2(y, x)) + 360.0) % 360.0
    # (-tiny + 360) % 360 rounds to 360.0 in floating point
    return 0.0 if bearing >= 360.0 else bearing


def cross_track_distance(
    point: Coordinate, track_start: Coordinate, track_end: Coordinate
) -> float:
    """Signed distance (km) of ``point`` from the great circle start -> end.

    Positive values lie to the right of the direction of travel, negative
    values to the left.
    """

    angular_13 = (
        haversine_distance(
            track_start.latitude, track_start.longitude, point.latitude, point.longitude
        )
        / EARTH_RADIUS_KM
    )
    bearing_13 = math.radians(
        initial_bearing(
            track_start.latitude, track_start.longitude, point.latitude, point.longitude
        )
    )
    bearing_12 = math.radians(
        initial_bearing(
            track_start.latitude,
            track_start.longitude,
            track_end.latitude,
            track_end.longitude,
        )
    )
    ratio = _clamp(math.sin(angular_13) * math.sin(bearing_13 - bearing_12), -1.0, 1.0)
    return math.asin(ratio) * EARTH_RADIUS_KM


def along_track_distance(
    point: Coordinate, track_start: Coordinate, track_end: Coordinate
) -> float:
    """Signed distance (km) from ``track_start`` to the foot of ``point`` on the track.

    Negative when the point sits behind the start of the track, judged by the
    bearing to the point differing from the track bearing by more than 90
    and less than 270 degrees.
    """

    direct = haversine_distance(
        track_start.latitude, track_start.longitude, point.latitude, point.longitude
    )
    cross_track = abs(cross_track_distance(point, track_start, track_end))
    if direct < cross_track:
        return 0.0
    along_track = math.sqrt(direct * direct - cross_track * cross_track)

    bearing_to_point = initial_bearing(
        track_start.latitude, track_start.longitude, point.latitude, point.longitude
    )
    track_bearing = initial_bearing(
        track_start.latitude, track_start.longitude, track_end.latitude, track_end.longitude
    )
    angle_difference = abs(bearing_to_point - track_bearing)
    if 90.0 < angle_difference < 270.0:
        return -along_track
    return along_track

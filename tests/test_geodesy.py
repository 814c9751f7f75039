"""Mini README: Tests for the great-circle geometry helpers.

Covers distance symmetry and degenerate inputs, cardinal bearings, and the
sign conventions of cross-track and along-track offsets using the
Los Angeles to New York great circle.
"""

from __future__ import annotations

import math

import pytest

from skywindow.route_planning import (
    EARTH_RADIUS_KM,
    Coordinate,
    along_track_distance,
    cross_track_distance,
    haversine_distance,
    initial_bearing,
)

LAX = Coordinate(33.9425, -118.4081)
JFK = Coordinate(40.6413, -73.7781)


def test_haversine_lax_jfk_distance() -> None:
    distance = haversine_distance(LAX.latitude, LAX.longitude, JFK.latitude, JFK.longitude)
    # spherical model; the ellipsoidal figure quoted by airlines is ~3983 km
    assert distance == pytest.approx(3974.2, abs=1.0)


def test_haversine_is_zero_for_identical_points() -> None:
    assert haversine_distance(40.0, -75.0, 40.0, -75.0) == 0.0
    assert haversine_distance(-89.5, 179.9, -89.5, 179.9) == 0.0


def test_haversine_is_symmetric() -> None:
    forward = haversine_distance(51.47, -0.4543, -33.9399, 151.1753)
    backward = haversine_distance(-33.9399, 151.1753, 51.47, -0.4543)
    assert forward == pytest.approx(backward)


def test_haversine_handles_antipodal_points() -> None:
    distance = haversine_distance(0.0, 0.0, 0.0, 180.0)
    assert not math.isnan(distance)
    assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_bearing_cardinal_directions() -> None:
    assert initial_bearing(0.0, 0.0, 10.0, 0.0) == 0.0
    assert initial_bearing(0.0, 0.0, 0.0, 10.0) == pytest.approx(90.0)
    assert initial_bearing(0.0, 0.0, -10.0, 0.0) == pytest.approx(180.0)
    assert initial_bearing(0.0, 0.0, 0.0, -10.0) == pytest.approx(270.0)


def test_bearing_lax_to_jfk_is_not_reversible() -> None:
    outbound = initial_bearing(LAX.latitude, LAX.longitude, JFK.latitude, JFK.longitude)
    inbound = initial_bearing(JFK.latitude, JFK.longitude, LAX.latitude, LAX.longitude)
    assert round(outbound) == 66
    assert 0.0 <= inbound < 360.0
    assert abs(inbound - outbound) != pytest.approx(180.0, abs=1.0)


def test_bearing_for_identical_points_is_zero() -> None:
    assert initial_bearing(12.0, 34.0, 12.0, 34.0) == 0.0


def test_cross_track_sign_convention() -> None:
    south_of_track = cross_track_distance(Coordinate(35.0, -95.0), LAX, JFK)
    north_of_track = cross_track_distance(Coordinate(45.0, -95.0), LAX, JFK)
    assert south_of_track > 0
    assert north_of_track < 0


def test_cross_track_is_zero_on_the_track() -> None:
    start = Coordinate(0.0, 0.0)
    end = Coordinate(0.0, 10.0)
    assert cross_track_distance(Coordinate(0.0, 5.0), start, end) == pytest.approx(0.0, abs=1e-9)


def test_cross_track_on_zero_length_track_is_finite() -> None:
    point = Coordinate(1.0, 1.0)
    value = cross_track_distance(point, LAX, LAX)
    assert not math.isnan(value)


def test_along_track_lies_within_route_for_midway_point() -> None:
    along = along_track_distance(Coordinate(37.0, -95.0), LAX, JFK)
    total = haversine_distance(LAX.latitude, LAX.longitude, JFK.latitude, JFK.longitude)
    assert 0 < along < total


def test_along_track_is_negative_behind_the_start() -> None:
    start = Coordinate(0.0, 0.0)
    end = Coordinate(0.0, 10.0)
    along = along_track_distance(Coordinate(0.0, -2.0), start, end)
    assert along == pytest.approx(-haversine_distance(0.0, 0.0, 0.0, -2.0), rel=1e-6)


def test_along_track_of_start_point_is_zero() -> None:
    assert along_track_distance(LAX, LAX, JFK) == 0.0

"""Tests for geodesic helpers and the polyline-backed line."""

from __future__ import annotations

import pytest

from openlr_rating.errors import InvalidMapDataError
from openlr_rating.geometry import (
    GeoLine,
    bearing_deg,
    determine_coordinate_in_distance,
    distance_m,
)
from openlr_rating.models import GeoCoordinates, Line


def test_destination_point_moves_along_bearing() -> None:
    start = GeoCoordinates(5.0, 52.0)

    end = determine_coordinate_in_distance(5.0, 52.0, 90, 0.02)

    assert end.longitude_deg > start.longitude_deg
    assert end.latitude_deg == pytest.approx(52.0, abs=1e-7)
    assert distance_m(start, end) == pytest.approx(20.0, abs=1e-6)
    assert bearing_deg(start, end) == pytest.approx(90.0, abs=1e-6)


def test_bearing_is_normalised() -> None:
    start = GeoCoordinates(5.0, 52.0)
    end = determine_coordinate_in_distance(5.0, 52.0, 270, 0.05)

    assert bearing_deg(start, end) == pytest.approx(270.0, abs=1e-6)


@pytest.mark.parametrize(
    "args",
    [
        (float("nan"), 52.0, 90, 0.02),
        (5.0, 91.0, 90, 0.02),
        (5.0, 52.0, float("inf"), 0.02),
    ],
)
def test_destination_point_rejects_invalid_input(args) -> None:
    with pytest.raises(InvalidMapDataError):
        determine_coordinate_in_distance(*args)


def test_geo_line_satisfies_line_protocol(straight_geo_line: GeoLine) -> None:
    assert isinstance(straight_geo_line, Line)
    assert straight_geo_line.length_m == pytest.approx(100.0, rel=1e-3)
    assert len(straight_geo_line.coordinates) == 2


def test_geo_line_interpolates_along_line(straight_geo_line: GeoLine) -> None:
    start = straight_geo_line.coordinates[0]

    midpoint = straight_geo_line.geo_coordinate_along_line(50)

    assert distance_m(start, midpoint) == pytest.approx(50.0, rel=1e-3)
    assert bearing_deg(start, midpoint) == pytest.approx(90.0, abs=0.01)


def test_geo_line_clamps_offsets_outside_extent(straight_geo_line: GeoLine) -> None:
    start, end = straight_geo_line.coordinates

    before = straight_geo_line.geo_coordinate_along_line(-20)
    after = straight_geo_line.geo_coordinate_along_line(500)

    assert distance_m(start, before) == pytest.approx(0.0, abs=1e-6)
    assert distance_m(end, after) == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize(
    "coordinates",
    [
        [],
        [(5.0, 52.0)],
        [(5.0, 52.0), (5.0, 52.0)],
        [(5.0, 52.0), (5.001, float("nan"))],
    ],
)
def test_geo_line_rejects_invalid_geometry(coordinates) -> None:
    with pytest.raises(InvalidMapDataError):
        GeoLine("bad", coordinates)

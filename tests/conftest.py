"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable location reference points
and lines so rating tests avoid duplicating geometry setup.
"""
from __future__ import annotations

import math
import os
import sys
from typing import Callable, List

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from openlr_rating.errors import InvalidMapDataError
from openlr_rating.geometry import GeoLine, determine_coordinate_in_distance
from openlr_rating.models import GeoCoordinates, LocationReferencePoint


# Approximate degrees of longitude per meter at 52°N.
DEG_LON_PER_M_52N = 1.0 / (111_320.0 * math.cos(math.radians(52.0)))


# --- Factory helpers -------------------------------------------------
class StubLine:
    """Line whose along-line coordinate comes from a plain function."""

    def __init__(self, resolve: Callable[[int], GeoCoordinates]) -> None:
        self._resolve = resolve
        self.requested: List[int] = []

    def geo_coordinate_along_line(self, distance_m: int) -> GeoCoordinates:
        self.requested.append(distance_m)
        return self._resolve(distance_m)


class BrokenLine:
    """Line whose lookups always fail with invalid map data."""

    def geo_coordinate_along_line(self, distance_m: int) -> GeoCoordinates:
        raise InvalidMapDataError(f"no geometry at {distance_m}")


def make_eastward_line(lon: float = 5.0, lat: float = 52.0) -> StubLine:
    return StubLine(
        lambda d: GeoCoordinates(lon + d * DEG_LON_PER_M_52N, lat)
    )


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def east_lrp() -> LocationReferencePoint:
    return LocationReferencePoint(
        longitude_deg=5.0, latitude_deg=52.0, bearing=90.0, is_last_lrp=False
    )


@pytest.fixture
def eastward_line() -> StubLine:
    return make_eastward_line()


@pytest.fixture
def broken_line() -> BrokenLine:
    return BrokenLine()


@pytest.fixture
def straight_geo_line() -> GeoLine:
    """A 100 m line heading due east from (5.0, 52.0)."""

    end = determine_coordinate_in_distance(5.0, 52.0, 90.0, 0.1)
    return GeoLine("east-100", [(5.0, 52.0), end.as_tuple()])


@pytest.fixture
def stub_line() -> Callable[[Callable[[int], GeoCoordinates]], StubLine]:
    return StubLine


@pytest.fixture
def eastward_line_factory() -> Callable[..., StubLine]:
    return make_eastward_line

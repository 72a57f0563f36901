"""Geodesic helpers and a polyline-backed map line."""

from __future__ import annotations

import math
from typing import Hashable, Iterable, List, Sequence

import numpy as np
from numpy.typing import NDArray
from pyproj import CRS, Geod, Transformer
from shapely.geometry import LineString

from .config import GEODESIC_ELLIPSOID, LINE_MIN_LENGTH_M
from .errors import InvalidMapDataError
from .models import GeoCoordinates, LonLat

MetricArray = NDArray[np.float64]

_GEOD = Geod(ellps=GEODESIC_ELLIPSOID)


def determine_coordinate_in_distance(
    longitude_deg: float,
    latitude_deg: float,
    bearing: float,
    distance_km: float,
) -> GeoCoordinates:
    """Return the point reached from a start coordinate along a bearing."""

    _require_valid_coordinate(longitude_deg, latitude_deg)
    if not (math.isfinite(bearing) and math.isfinite(distance_km)):
        raise InvalidMapDataError("Bearing and distance must be finite")
    lon, lat, _ = _GEOD.fwd(longitude_deg, latitude_deg, bearing, distance_km * 1000.0)
    return GeoCoordinates(float(lon), float(lat))


def distance_m(a: GeoCoordinates, b: GeoCoordinates) -> float:
    """Geodesic distance in meters between two coordinates."""

    _, _, dist = _GEOD.inv(a.longitude_deg, a.latitude_deg, b.longitude_deg, b.latitude_deg)
    return float(dist)


def bearing_deg(a: GeoCoordinates, b: GeoCoordinates) -> float:
    """Initial bearing from ``a`` to ``b`` in degrees within [0, 360)."""

    azimuth, _, _ = _GEOD.inv(a.longitude_deg, a.latitude_deg, b.longitude_deg, b.latitude_deg)
    return float(azimuth) % 360.0


class GeoLine:
    """Map line defined by an ordered list of lon/lat vertices.

    Distances along the line are measured in a local UTM projection so that
    shapely can interpolate in meters. Offsets before the start resolve to the
    first vertex and offsets past the end resolve to the last one.
    """

    def __init__(self, line_id: Hashable, coordinates: Iterable[LonLat]) -> None:
        points = [(float(lon), float(lat)) for lon, lat in coordinates]
        if len(points) < 2:
            raise InvalidMapDataError(f"Line {line_id!r} needs at least two coordinates")
        for lon, lat in points:
            _require_valid_coordinate(lon, lat)
        self.line_id = line_id
        self._points: List[LonLat] = points
        self._transformer = _build_local_transformer(points)
        self._metric = LineString(_project_points(points, self._transformer))
        if self._metric.length <= LINE_MIN_LENGTH_M:
            raise InvalidMapDataError(f"Line {line_id!r} has no usable length")

    @property
    def coordinates(self) -> List[GeoCoordinates]:
        return [GeoCoordinates(lon, lat) for lon, lat in self._points]

    @property
    def length_m(self) -> float:
        return float(self._metric.length)

    def geo_coordinate_along_line(self, distance_m: int) -> GeoCoordinates:
        """Return the coordinate located ``distance_m`` meters along the line."""

        if not math.isfinite(distance_m):
            raise InvalidMapDataError("Distance along line must be finite")
        # shapely measures negative distances from the end; clamp instead.
        clamped = min(max(float(distance_m), 0.0), self.length_m)
        point = self._metric.interpolate(clamped)
        lon, lat = self._transformer.transform(point.x, point.y, direction="INVERSE")
        return GeoCoordinates(float(lon), float(lat))

    def __repr__(self) -> str:
        return f"GeoLine(line_id={self.line_id!r}, vertices={len(self._points)})"


def _require_valid_coordinate(longitude_deg: float, latitude_deg: float) -> None:
    if not (math.isfinite(longitude_deg) and math.isfinite(latitude_deg)):
        raise InvalidMapDataError("Coordinates must be finite")
    if not -90.0 <= latitude_deg <= 90.0:
        raise InvalidMapDataError(f"Latitude {latitude_deg} is out of range")


def _build_local_transformer(points: Sequence[LonLat]) -> Transformer:
    """Build a local UTM transformer centred on the provided coordinates."""

    mean_lon = float(np.mean([pt[0] for pt in points]))
    mean_lat = float(np.mean([pt[1] for pt in points]))
    zone = int((mean_lon + 180.0) // 6.0) + 1
    zone = max(1, min(zone, 60))
    if mean_lat >= 0:
        epsg = 32600 + zone
    else:
        epsg = 32700 + zone
    return Transformer.from_crs(CRS.from_epsg(4326), CRS.from_epsg(epsg), always_xy=True)


def _project_points(points: Sequence[LonLat], transformer: Transformer) -> MetricArray:
    """Project lon/lat pairs through an existing transformer."""

    lons = np.asarray([pt[0] for pt in points], dtype=float)
    lats = np.asarray([pt[1] for pt in points], dtype=float)
    xs, ys = transformer.transform(lons, lats)
    return np.column_stack((xs, ys)).astype(float, copy=False)


__all__ = [
    "GeoLine",
    "bearing_deg",
    "determine_coordinate_in_distance",
    "distance_m",
]

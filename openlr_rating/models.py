"""Dataclasses and protocols describing rating inputs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple, runtime_checkable

from .config import BEARING_DISTANCE_M


LonLat = Tuple[float, float]


@dataclass(frozen=True, slots=True)
class GeoCoordinates:
    """Immutable longitude/latitude pair in decimal degrees."""

    longitude_deg: float
    latitude_deg: float

    def as_tuple(self) -> LonLat:
        return (self.longitude_deg, self.latitude_deg)


@dataclass(frozen=True, slots=True)
class LocationReferencePoint:
    """Waypoint of a location reference: position, bearing and last-point flag."""

    longitude_deg: float
    latitude_deg: float
    bearing: float
    is_last_lrp: bool = False

    @property
    def coordinates(self) -> GeoCoordinates:
        return GeoCoordinates(self.longitude_deg, self.latitude_deg)


@dataclass(frozen=True, slots=True)
class DecoderProperties:
    """Decoder settings consumed by the rating step."""

    bearing_distance_m: int = BEARING_DISTANCE_M

    def __post_init__(self) -> None:
        if self.bearing_distance_m <= 0:
            raise ValueError("bearing_distance_m must be greater than zero")


@runtime_checkable
class Line(Protocol):
    """Map line able to resolve a coordinate at a distance along itself."""

    def geo_coordinate_along_line(self, distance_m: int) -> GeoCoordinates:
        """Return the coordinate ``distance_m`` meters from the line start.

        Implementations raise :class:`~openlr_rating.errors.InvalidMapDataError`
        when the point cannot be resolved.
        """
        ...


__all__ = [
    "DecoderProperties",
    "GeoCoordinates",
    "Line",
    "LocationReferencePoint",
    "LonLat",
]

"""Fréchet-distance rating of OpenLR candidate lines."""

from .errors import (
    DecoderErrorCode,
    DecoderProcessingError,
    InvalidMapDataError,
    OpenLRProcessingError,
)
from .frechet import discrete_frechet_distance
from .geometry import GeoLine, determine_coordinate_in_distance
from .models import DecoderProperties, GeoCoordinates, Line, LocationReferencePoint
from .rating import (
    FrechetRating,
    RatingCandidate,
    get_rating,
    project,
    rate_candidates,
    rating_from_distance,
)

__all__ = [
    "DecoderErrorCode",
    "DecoderProcessingError",
    "DecoderProperties",
    "FrechetRating",
    "GeoCoordinates",
    "GeoLine",
    "InvalidMapDataError",
    "Line",
    "LocationReferencePoint",
    "OpenLRProcessingError",
    "RatingCandidate",
    "determine_coordinate_in_distance",
    "discrete_frechet_distance",
    "get_rating",
    "project",
    "rate_candidates",
    "rating_from_distance",
]

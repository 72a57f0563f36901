"""Fréchet-distance rating of candidate lines against location reference points.

The rating compares two short shapes: the LRP followed by a point synthesized
``bearing_distance_m`` meters along its bearing, and the candidate line
sampled at the projection offset and ``bearing_distance_m`` further along (or
back along, for the last LRP). The discrete Fréchet distance between the two
coordinate pairs is inverted and truncated to an integer, so closer shapes
rate higher.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging
import math
from typing import List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .config import RATING_MAX_VALUE, RATING_MAX_WORKERS
from .errors import DecoderErrorCode, DecoderProcessingError, InvalidMapDataError
from .frechet import discrete_frechet_distance
from .geometry import determine_coordinate_in_distance
from .models import DecoderProperties, GeoCoordinates, Line, LocationReferencePoint

_LOG = logging.getLogger(__name__)

CoordinatePair = Tuple[GeoCoordinates, GeoCoordinates]


@dataclass(frozen=True, slots=True)
class RatingCandidate:
    """A candidate line together with the LRP's projection onto it."""

    line: Line
    distance: int
    projection_along_line: int


@runtime_checkable
class RatingFunction(Protocol):
    def get_rating(
        self,
        distance: int,
        lrp: LocationReferencePoint,
        line: Line,
        projection_along_line: int,
    ) -> int: ...


def project(
    lrp: LocationReferencePoint,
    line: Line,
    bearing_distance_m: int,
    projection_along_line: int,
) -> Tuple[CoordinatePair, CoordinatePair]:
    """Return the LRP coordinate pair and the matching candidate-line pair.

    Map lookup failures surface as :class:`InvalidMapDataError`.
    """

    lrp_end = determine_coordinate_in_distance(
        lrp.longitude_deg,
        lrp.latitude_deg,
        int(lrp.bearing),
        bearing_distance_m / 1000,
    )
    # The last LRP's bearing points back along the path.
    offset = -bearing_distance_m if lrp.is_last_lrp else bearing_distance_m

    start = line.geo_coordinate_along_line(projection_along_line)
    end = line.geo_coordinate_along_line(projection_along_line + offset)
    return (lrp.coordinates, lrp_end), (start, end)


def rating_from_distance(frechet_distance: float) -> int:
    """Invert a Fréchet distance into an integer rating.

    A zero distance, and any rating that would exceed it, maps to
    ``RATING_MAX_VALUE``.
    """

    if math.isnan(frechet_distance) or frechet_distance < 0:
        raise ValueError(f"Invalid Fréchet distance {frechet_distance!r}")
    if frechet_distance == 0:
        _LOG.warning("Zero Fréchet distance; clamping rating to %d", RATING_MAX_VALUE)
        return RATING_MAX_VALUE
    inverse = 1 / frechet_distance
    if inverse >= RATING_MAX_VALUE:
        return RATING_MAX_VALUE
    return int(inverse)


def get_rating(
    properties: DecoderProperties,
    distance: int,
    lrp: LocationReferencePoint,
    line: Line,
    projection_along_line: int,
) -> int:
    """Rate how well ``line`` around its projection matches the LRP direction.

    ``distance`` is the LRP-to-line distance supplied by the decoder; it is
    accepted for interface compatibility and only logged.
    """

    try:
        lrp_pair, line_pair = project(
            lrp, line, properties.bearing_distance_m, projection_along_line
        )
    except InvalidMapDataError as exc:
        raise DecoderProcessingError(DecoderErrorCode.INVALID_MAP_DATA, str(exc)) from exc

    frechet = discrete_frechet_distance(
        [pt.as_tuple() for pt in lrp_pair],
        [pt.as_tuple() for pt in line_pair],
    )
    rating = rating_from_distance(frechet)
    _LOG.debug(
        "Rated line=%r lrp=(%.6f, %.6f) distance=%d projection=%d frechet=%.9f rating=%d",
        line,
        lrp.longitude_deg,
        lrp.latitude_deg,
        distance,
        projection_along_line,
        frechet,
        rating,
    )
    return rating


class FrechetRating:
    """Rating strategy bound to a fixed set of decoder properties."""

    def __init__(self, properties: DecoderProperties | None = None) -> None:
        self.properties = properties or DecoderProperties()

    def get_rating(
        self,
        distance: int,
        lrp: LocationReferencePoint,
        line: Line,
        projection_along_line: int,
    ) -> int:
        return get_rating(self.properties, distance, lrp, line, projection_along_line)


def rate_candidates(
    properties: DecoderProperties,
    lrp: LocationReferencePoint,
    candidates: Sequence[RatingCandidate],
    max_workers: Optional[int] = None,
) -> List[Optional[int]]:
    """Rate candidates in parallel, keeping the input order.

    Candidates with invalid map data rate as ``None``; other errors propagate.
    """

    if not candidates:
        return []

    def rate(candidate: RatingCandidate) -> Optional[int]:
        try:
            return get_rating(
                properties,
                candidate.distance,
                lrp,
                candidate.line,
                candidate.projection_along_line,
            )
        except DecoderProcessingError as exc:
            _LOG.warning("Skipping candidate line=%r: %s", candidate.line, exc)
            return None

    workers = max(1, min(max_workers or RATING_MAX_WORKERS, len(candidates)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        return list(executor.map(rate, candidates))


__all__ = [
    "CoordinatePair",
    "FrechetRating",
    "RatingCandidate",
    "RatingFunction",
    "get_rating",
    "project",
    "rate_candidates",
    "rating_from_distance",
]

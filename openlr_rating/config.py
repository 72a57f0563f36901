"""Central configuration for the OpenLR candidate rating package.

All values are constants imported by the rest of the package. Each one can
be overridden through an environment variable (optionally via a local
`.env`); unparsable values, and non-positive counts, fall back to the
default.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_positive_int(key: str, default: int) -> int:
    value = _env_int(key, default)
    if value <= 0:
        return default
    return value


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# Rating settings
# ---------------------------------------------------------------------------
# Distance (meters) used to synthesize the second point along the LRP bearing
# and to step along the candidate line.
BEARING_DISTANCE_M = _env_positive_int("OPENLR_BEARING_DISTANCE_M", 20)

# Rating returned for a zero Fréchet distance; every rating is clamped to it.
RATING_MAX_VALUE = _env_positive_int("OPENLR_RATING_MAX_VALUE", 2_147_483_647)


# ---------------------------------------------------------------------------
# Geodesy
# ---------------------------------------------------------------------------
# Ellipsoid name understood by pyproj.Geod.
GEODESIC_ELLIPSOID = os.getenv("OPENLR_GEODESIC_ELLIPSOID", "WGS84")

# Lines shorter than this (meters) are treated as degenerate map data.
LINE_MIN_LENGTH_M = _env_float("OPENLR_LINE_MIN_LENGTH_M", 0.0)


# ---------------------------------------------------------------------------
# Performance tuning
# ---------------------------------------------------------------------------
# Threads used when rating a batch of candidate lines.
RATING_MAX_WORKERS = _env_positive_int("OPENLR_RATING_MAX_WORKERS", 4)

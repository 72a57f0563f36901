"""Discrete Fréchet distance between two ordered point sequences."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from numpy.typing import NDArray

MetricArray = NDArray[np.float64]

# Memo cells holding this value have not been computed yet.
UNSET = -1.0


def discrete_frechet_distance(
    first_points: Sequence[Sequence[float]],
    second_points: Sequence[Sequence[float]],
) -> float:
    """Compute the discrete Fréchet distance between two sequences of points.

    Point distances are planar Euclidean distances in whatever units the
    coordinates carry. A fresh memo table is allocated per call.
    """

    a = _as_point_array(first_points)
    b = _as_point_array(second_points)
    if len(a) == 0 or len(b) == 0:
        raise ValueError("Fréchet distance needs at least one point per sequence")
    memo = new_memo_table(len(a), len(b))
    # Row-order fill: every call finds its neighbours populated.
    for i in range(len(a)):
        for j in range(len(b)):
            compute_discrete_frechet_distance(a, b, memo, i, j)
    return float(memo[-1, -1])


def new_memo_table(rows: int, cols: int) -> MetricArray:
    """Return a memo table with every cell marked as not yet computed."""

    return np.full((rows, cols), UNSET, dtype=float)


def compute_discrete_frechet_distance(
    a: MetricArray,
    b: MetricArray,
    memo: MetricArray,
    i: int,
    j: int,
) -> float:
    """Return the coupling distance F(i, j), filling ``memo`` top-down."""

    rows, cols = memo.shape
    if not (0 <= i < rows and 0 <= j < cols):
        raise IndexError(f"Fréchet index ({i}, {j}) outside {rows}x{cols} table")
    if memo[i, j] > UNSET:
        return float(memo[i, j])

    dist = float(np.linalg.norm(a[i] - b[j]))
    if i == 0 and j == 0:
        memo[i, j] = dist
    elif j == 0:
        memo[i, j] = _max(compute_discrete_frechet_distance(a, b, memo, i - 1, 0), dist)
    elif i == 0:
        memo[i, j] = _max(compute_discrete_frechet_distance(a, b, memo, 0, j - 1), dist)
    else:
        memo[i, j] = _max(
            _min(
                compute_discrete_frechet_distance(a, b, memo, i - 1, j),
                compute_discrete_frechet_distance(a, b, memo, i - 1, j - 1),
                compute_discrete_frechet_distance(a, b, memo, i, j - 1),
            ),
            dist,
        )
    return float(memo[i, j])


def _max(*values: float) -> float:
    return max(values)


def _min(*values: float) -> float:
    return min(values)


def _as_point_array(points: Sequence[Sequence[float]]) -> MetricArray:
    array = np.asarray(points, dtype=float)
    if array.size == 0:
        return np.empty((0, 2), dtype=float)
    if array.ndim != 2 or array.shape[1] != 2:
        raise ValueError("Expected a sequence of 2D coordinates")
    return array


__all__ = [
    "UNSET",
    "compute_discrete_frechet_distance",
    "discrete_frechet_distance",
    "new_memo_table",
]

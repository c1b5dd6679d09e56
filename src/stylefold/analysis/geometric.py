"""Read-only statistics over a point set.

All functions accept an empty set and return a defined neutral value.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from stylefold.model.geometry import Point


def _as_array(points: Sequence[Point]) -> np.ndarray:
    return np.asarray(points, dtype=float).reshape(-1, 2)


def variance(values: Sequence[float]) -> float:
    """Population variance; 0 for an empty sequence."""
    if len(values) == 0:
        return 0.0
    return float(np.var(np.asarray(values, dtype=float)))


def centroid(points: Sequence[Point]) -> Point:
    if not points:
        return (0.0, 0.0)
    mean = _as_array(points).mean(axis=0)
    return (float(mean[0]), float(mean[1]))


def spread(points: Sequence[Point]) -> float:
    """Largest distance from the origin."""
    if not points:
        return 0.0
    return float(np.max(np.hypot(*_as_array(points).T)))


def angle_variance(points: Sequence[Point]) -> float:
    if not points:
        return 0.0
    data = _as_array(points)
    return variance(np.arctan2(data[:, 1], data[:, 0]))


def symmetry_score(points: Sequence[Point]) -> float:
    """``1 / (1 + mean distance to the point reflected through the origin)``.

    1.0 for an origin-symmetric (or empty) set, tending to 0 as it drifts.
    """
    if not points:
        return 1.0
    data = _as_array(points)
    distances = np.hypot(*(data - (-data)).T)
    return float(1.0 / (1.0 + distances.mean()))


def clustering_score(points: Sequence[Point]) -> float:
    """``1 / (1 + variance of distances from the origin)``."""
    if not points:
        return 1.0
    return 1.0 / (1.0 + variance(np.hypot(*_as_array(points).T)))

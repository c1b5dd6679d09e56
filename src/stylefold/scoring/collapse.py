"""Geometric similarity primitive: the Collapser protocol and a default."""

from __future__ import annotations

import math
from typing import Protocol, Sequence

Vector = Sequence[float]


class Collapser(Protocol):
    """Compare two ordered vector sequences and return a score in [0, 1].

    Callers pass query vectors first and reference vectors second.
    """

    def collapse(
        self, query: Sequence[Vector], reference: Sequence[Vector]
    ) -> float: ...


def _angle(vector: Vector) -> float:
    x = vector[0] if len(vector) > 0 else 0.0
    y = vector[1] if len(vector) > 1 else 0.0
    return math.atan2(y, x)


def _circular_distance(a: float, b: float) -> float:
    diff = abs(a - b) % (2 * math.pi)
    return min(diff, 2 * math.pi - diff)


class AngularCollapser:
    """Fraction of query vectors aligned with some reference vector.

    A query vector counts as aligned when its polar angle lies within
    ``epsilon`` radians of at least one reference angle.  Only the first two
    components of each vector are used.
    """

    def __init__(self, epsilon: float = 0.1745329) -> None:
        self.epsilon = epsilon

    def collapse(
        self, query: Sequence[Vector], reference: Sequence[Vector]
    ) -> float:
        if not query or not reference:
            return 0.0
        reference_angles = [_angle(v) for v in reference]
        aligned = 0
        for vector in query:
            angle = _angle(vector)
            if any(_circular_distance(angle, r) <= self.epsilon for r in reference_angles):
                aligned += 1
        return aligned / len(query)

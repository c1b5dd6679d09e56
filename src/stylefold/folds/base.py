"""Base protocol for fold transforms."""

from __future__ import annotations

from typing import Protocol

from stylefold.model.geometry import Point


class FoldTransform(Protocol):
    """A point-set to point-set transformation with no side effects.

    Implementations never mutate *points* and return at most as many points
    as they receive.
    """

    def apply(self, points: list[Point]) -> list[Point]: ...

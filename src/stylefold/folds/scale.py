"""UI fold: uniform scaling toward the origin."""

from __future__ import annotations

from stylefold.model.geometry import Point


class ScaleFoldTransform:
    """Multiply both coordinates by ``factor``; order and count are preserved."""

    def __init__(self, factor: float = 0.8) -> None:
        self.factor = factor

    def apply(self, points: list[Point]) -> list[Point]:
        return [(x * self.factor, y * self.factor) for x, y in points]

"""Pass-through fold used by CODE_FOLD, STORAGE_FOLD and unrecognized symbols."""

from __future__ import annotations

from stylefold.model.geometry import Point


class IdentityFoldTransform:
    def apply(self, points: list[Point]) -> list[Point]:
        return list(points)

"""Statistics over a parsed stylesheet."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from stylefold.stylesheet.model import Declaration, Selector


def specificity_range(selectors: Sequence[Selector]) -> tuple[int, int]:
    scores = [s.specificity for s in selectors]
    if not scores:
        return (0, 0)
    return (min(scores), max(scores))


def declaration_distribution(declarations: Sequence[Declaration]) -> dict[str, int]:
    """Count declarations per property name, in first-seen order."""
    return dict(Counter(d.name for d in declarations))

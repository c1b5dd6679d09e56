"""Compression efficiency: blend of size reduction and structure preservation."""

from __future__ import annotations

from stylefold.config import DEFAULT_CONFIG, StylefoldConfig
from stylefold.embedding.hashing import utf16_length


def compression_ratio(original: str, compressed: str) -> float:
    """Size ratio in UTF-16 code units, the unit text lengths are measured in."""
    return utf16_length(original) / max(1, utf16_length(compressed))


def compression_efficiency(
    original: str,
    compressed: str,
    similarity_score: float,
    config: StylefoldConfig | None = None,
) -> float:
    """Return ``(ratio * 0.6 + similarity * 0.4) * 100``.

    Not clamped: a large enough ratio pushes the result above 100.
    """
    cfg = config or DEFAULT_CONFIG
    ratio = compression_ratio(original, compressed)
    return (ratio * cfg.ratio_weight + similarity_score * cfg.similarity_weight) * 100

"""Fold symbols and compression-state tags."""

from __future__ import annotations

from enum import StrEnum


class Fold(StrEnum):
    """Named geometric compression transforms."""

    DATA_FOLD = "DATA_FOLD"
    CODE_FOLD = "CODE_FOLD"
    UI_FOLD = "UI_FOLD"
    STORAGE_FOLD = "STORAGE_FOLD"


class CompressionState(StrEnum):
    """Caller intent tag; accepted by the transform but never branched on."""

    RAW = "raw"
    PARTIALLY_COMPRESSED = "partially-compressed"
    FOLDED = "folded"
    SUPERPOSED = "superposed"
    ENTANGLED = "entangled"
    OPTIMIZED = "optimized"


# Fold symbols are also written with delimiter glyphs, e.g. "⟁UI_FOLD⟁".
_FOLD_DELIMITER = "⟁"


def parse_fold(symbol: Fold | str | None) -> Fold | None:
    """Resolve *symbol* to a :class:`Fold`, or ``None`` when unrecognized."""
    if symbol is None:
        return None
    if isinstance(symbol, Fold):
        return symbol
    name = symbol.strip().strip(_FOLD_DELIMITER).strip().upper()
    try:
        return Fold(name)
    except ValueError:
        return None

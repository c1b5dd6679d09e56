"""Stylefold: deterministic geometric embedding and fold compression of stylesheets."""

from __future__ import annotations

__version__ = "0.1.0"

from stylefold.config import StylefoldConfig
from stylefold.engine import CompressionEngine, CompressionResult
from stylefold.folds import apply_fold
from stylefold.model import CompressionState, Fold, FoldGraph
from stylefold.stylesheet import parse_stylesheet
from stylefold.transform import transform_fold_to_graph

__all__ = [
    "__version__",
    "StylefoldConfig",
    "CompressionEngine",
    "CompressionResult",
    "CompressionState",
    "Fold",
    "FoldGraph",
    "apply_fold",
    "parse_stylesheet",
    "transform_fold_to_graph",
]

"""Fold dispatch: map a fold symbol to its geometric transform."""

from __future__ import annotations

import logging

from stylefold.config import DEFAULT_CONFIG, StylefoldConfig
from stylefold.folds.base import FoldTransform
from stylefold.folds.cluster import ClusterFoldTransform, kmeans_clusters
from stylefold.folds.identity import IdentityFoldTransform
from stylefold.folds.scale import ScaleFoldTransform
from stylefold.model.fold import CompressionState, Fold, parse_fold
from stylefold.model.geometry import Point

logger = logging.getLogger(__name__)

__all__ = [
    "FoldTransform",
    "ClusterFoldTransform",
    "ScaleFoldTransform",
    "IdentityFoldTransform",
    "kmeans_clusters",
    "fold_transforms",
    "apply_fold",
    "apply_compression_calculus",
]


def fold_transforms(config: StylefoldConfig | None = None) -> dict[Fold, FoldTransform]:
    """Return the transform registered for every :class:`Fold` member."""
    cfg = config or DEFAULT_CONFIG
    return {
        Fold.DATA_FOLD: ClusterFoldTransform(cfg.max_clusters, cfg.kmeans_iterations),
        Fold.CODE_FOLD: IdentityFoldTransform(),
        Fold.UI_FOLD: ScaleFoldTransform(cfg.ui_scale),
        Fold.STORAGE_FOLD: IdentityFoldTransform(),
    }


def apply_fold(
    points: list[Point],
    fold: Fold | str | None,
    config: StylefoldConfig | None = None,
) -> list[Point]:
    """Apply the transform selected by *fold*; unrecognized symbols are identity."""
    resolved = parse_fold(fold)
    if resolved is None:
        logger.debug("Unrecognized fold %r, passing %d point(s) through", fold, len(points))
        return IdentityFoldTransform().apply(points)
    transform = fold_transforms(config)[resolved]
    folded = transform.apply(points)
    logger.debug("Applied %s: %d -> %d point(s)", resolved, len(points), len(folded))
    return folded


def apply_compression_calculus(
    points: list[Point],
    state: CompressionState | str,
    fold: Fold | str | None,
) -> list[Point]:
    """Hook for state-dependent compression; currently returns *points* unchanged."""
    return list(points)

"""Tunable constants for embedding, folding, and scoring."""

from __future__ import annotations

from dataclasses import dataclass

from stylefold.model.fold import Fold


@dataclass(frozen=True)
class StylefoldConfig:
    epsilon: float = 0.1745329  # 10 degrees, angular tolerance for collapse
    max_clusters: int = 5
    ui_scale: float = 0.8
    kmeans_iterations: int = 20
    ratio_weight: float = 0.6
    similarity_weight: float = 0.4
    default_fold: Fold = Fold.UI_FOLD
    target_efficiency: float = 90.0


DEFAULT_CONFIG = StylefoldConfig()

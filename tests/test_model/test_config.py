from __future__ import annotations

import pytest

from stylefold.config import DEFAULT_CONFIG, StylefoldConfig
from stylefold.model.fold import Fold


class TestStylefoldConfig:
    def test_default_values(self) -> None:
        cfg = StylefoldConfig()
        assert cfg.epsilon == 0.1745329
        assert cfg.max_clusters == 5
        assert cfg.ui_scale == 0.8
        assert cfg.kmeans_iterations == 20
        assert cfg.ratio_weight == 0.6
        assert cfg.similarity_weight == 0.4
        assert cfg.default_fold is Fold.UI_FOLD
        assert cfg.target_efficiency == 90.0

    def test_module_default(self) -> None:
        assert DEFAULT_CONFIG == StylefoldConfig()

    def test_frozen_immutability(self) -> None:
        cfg = StylefoldConfig()
        with pytest.raises(AttributeError):
            cfg.ui_scale = 0.5  # type: ignore[misc]

    def test_equality(self) -> None:
        assert StylefoldConfig(max_clusters=3) != StylefoldConfig(max_clusters=4)

    def test_hashable(self) -> None:
        assert StylefoldConfig() in {StylefoldConfig()}

"""Compression engine: compress, geometrize, score, and analyze stylesheets."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from stylefold.analysis.reports import compression_report, geometric_report, structural_report
from stylefold.config import DEFAULT_CONFIG, StylefoldConfig
from stylefold.embedding.embedder import text_to_vectors
from stylefold.embedding.hashing import utf16_length
from stylefold.model.fold import CompressionState, Fold
from stylefold.model.geometry import FoldGraph
from stylefold.scoring.collapse import AngularCollapser, Collapser
from stylefold.scoring.efficiency import compression_efficiency, compression_ratio
from stylefold.stylesheet.minify import extract_query, minify_css
from stylefold.stylesheet.parser import parse_stylesheet
from stylefold.transform import transform_fold_to_graph

logger = logging.getLogger(__name__)


class CompressionMethod(StrEnum):
    MINIFY = "minify"
    NONE = "none"


class OutputFormat(StrEnum):
    CSS = "css"
    TENSOR = "tensor"
    ALL = "all"


class AnalysisKind(StrEnum):
    STRUCTURAL = "structural"
    GEOMETRIC = "geometric"
    COMPRESSION = "compression"


@dataclass
class CompressionResult:
    """Output of :meth:`CompressionEngine.process`."""

    compressed_css: str
    graph: FoldGraph
    collapse_score: float
    efficiency: float


def compress_css(css: str, method: CompressionMethod | str) -> str:
    if CompressionMethod(method) is CompressionMethod.MINIFY:
        return minify_css(css)
    return css


class CompressionEngine:
    """Runs text compression and scores how much structure survived it.

    The collapse primitive is injectable; :class:`AngularCollapser` with the
    configured epsilon is used when none is given.
    """

    def __init__(
        self,
        config: StylefoldConfig | None = None,
        collapser: Collapser | None = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.collapser = collapser or AngularCollapser(self.config.epsilon)

    def process(
        self,
        css: str,
        fold: Fold | str | None = None,
        state: CompressionState | str = CompressionState.OPTIMIZED,
        method: CompressionMethod | str = CompressionMethod.MINIFY,
    ) -> CompressionResult:
        fold = fold or self.config.default_fold
        compressed = compress_css(css, method)
        graph = transform_fold_to_graph(fold, compressed, state, config=self.config)

        query = text_to_vectors(extract_query(compressed))
        score = self.collapser.collapse(query, graph.to_vectors())
        efficiency = compression_efficiency(css, compressed, score, config=self.config)
        logger.info(
            "Processed %d -> %d chars with %s: collapse=%.4f efficiency=%.2f",
            len(css),
            len(compressed),
            fold,
            score,
            efficiency,
        )
        return CompressionResult(
            compressed_css=compressed,
            graph=graph,
            collapse_score=score,
            efficiency=efficiency,
        )

    def compress_and_geometrize(
        self,
        css: str,
        fold: Fold | str | None = None,
        target_efficiency: float | None = None,
        output_format: OutputFormat | str = OutputFormat.ALL,
        method: CompressionMethod | str = CompressionMethod.MINIFY,
    ) -> dict[str, Any]:
        """Process *css* and shape the result for the requested output format."""
        output_format = OutputFormat(output_format)
        target = self.config.target_efficiency if target_efficiency is None else target_efficiency
        result = self.process(css, fold, CompressionState.OPTIMIZED, method)

        outputs: dict[str, Any] = {
            "efficiency": result.efficiency,
            "meets_target": result.efficiency >= target,
        }
        if output_format in (OutputFormat.ALL, OutputFormat.CSS):
            outputs["css"] = result.compressed_css
            outputs["css_length"] = utf16_length(result.compressed_css)
            outputs["compression_ratio"] = compression_ratio(css, result.compressed_css)
        if output_format in (OutputFormat.ALL, OutputFormat.TENSOR):
            outputs["tensor"] = {
                "nodes": [list(node) for node in result.graph.nodes],
                "edges": [list(edge) for edge in result.graph.edges],
                "vector": result.graph.to_vectors(),
            }
        outputs["collapse_score"] = result.collapse_score
        outputs["geometric_similarity"] = result.collapse_score
        return outputs

    def analyze_patterns(
        self, css: str, kind: AnalysisKind | str = AnalysisKind.STRUCTURAL
    ) -> dict[str, Any]:
        """Build the raw UI-fold graph of *css* and report on it."""
        kind = AnalysisKind(kind)
        graph = transform_fold_to_graph(
            Fold.UI_FOLD, css, CompressionState.RAW, config=self.config
        )
        if kind is AnalysisKind.GEOMETRIC:
            return geometric_report(graph)
        if kind is AnalysisKind.COMPRESSION:
            return compression_report(css, graph, self.collapser, config=self.config)
        return structural_report(parse_stylesheet(css), graph)

"""Pattern reports combining structural, geometric, and compression views."""

from __future__ import annotations

from typing import Any

from stylefold.analysis.geometric import (
    angle_variance,
    centroid,
    clustering_score,
    spread,
    symmetry_score,
)
from stylefold.analysis.structural import declaration_distribution, specificity_range
from stylefold.config import StylefoldConfig
from stylefold.embedding.hashing import utf16_length
from stylefold.model.fold import CompressionState, Fold
from stylefold.model.geometry import FoldGraph
from stylefold.scoring.collapse import Collapser
from stylefold.scoring.efficiency import compression_ratio
from stylefold.stylesheet.minify import minify_css
from stylefold.stylesheet.model import Stylesheet
from stylefold.transform import transform_fold_to_graph


def structural_report(stylesheet: Stylesheet, graph: FoldGraph) -> dict[str, Any]:
    return {
        "selector_count": len(stylesheet.selectors),
        "declaration_count": len(stylesheet.declarations),
        "specificity_range": specificity_range(stylesheet.selectors),
        "declaration_distribution": declaration_distribution(stylesheet.declarations),
        "graph_metrics": {
            "node_count": graph.node_count,
            "edge_count": graph.edge_count,
            "density": graph.density,
        },
    }


def geometric_report(graph: FoldGraph) -> dict[str, Any]:
    nodes = graph.nodes
    return {
        "centroid": centroid(nodes),
        "spread": spread(nodes),
        "angle_variance": angle_variance(nodes),
        "symmetry_score": symmetry_score(nodes),
        "clustering_score": clustering_score(nodes),
    }


def compression_report(
    css: str,
    graph: FoldGraph,
    collapser: Collapser,
    config: StylefoldConfig | None = None,
) -> dict[str, Any]:
    """Compare *graph* against the graph of the minified text."""
    minified = minify_css(css)
    minified_graph = transform_fold_to_graph(
        Fold.UI_FOLD, minified, CompressionState.RAW, config=config
    )
    preservation = collapser.collapse(graph.to_vectors(), minified_graph.to_vectors())
    original_size = utf16_length(css)
    minified_size = utf16_length(minified)
    return {
        "original_size": original_size,
        "minified_size": minified_size,
        "compression_ratio": compression_ratio(css, minified),
        "structure_preservation": preservation,
        "potential_gain": (
            (original_size - minified_size) / original_size * 100 if original_size else 0.0
        ),
    }

"""Stylesheet text to folded geometric graph."""

from __future__ import annotations

import logging

import numpy as np

from stylefold.config import StylefoldConfig
from stylefold.embedding.graph_builder import build_graph
from stylefold.folds import apply_compression_calculus, apply_fold
from stylefold.folds.cluster import nearest_indices
from stylefold.model.fold import CompressionState, Fold
from stylefold.model.geometry import FoldGraph, Point
from stylefold.stylesheet.parser import parse_stylesheet
from stylefold.validation.validator import validate_or_raise

logger = logging.getLogger(__name__)


def remap_edges(
    original: list[Point],
    folded: list[Point],
    edges: list[tuple[int, int]],
) -> list[tuple[int, int]]:
    """Re-point *edges* at the folded node nearest to each original endpoint.

    Self-loops and repeated edges produced by the merge are dropped; first
    occurrence order is kept.
    """
    if not folded:
        return []
    mapping = nearest_indices(
        np.asarray(original, dtype=float).reshape(-1, 2),
        np.asarray(folded, dtype=float).reshape(-1, 2),
    )
    remapped: list[tuple[int, int]] = []
    seen: set[tuple[int, int]] = set()
    for frm, to in edges:
        edge = (int(mapping[frm]), int(mapping[to]))
        if edge[0] == edge[1] or edge in seen:
            continue
        seen.add(edge)
        remapped.append(edge)
    return remapped


def transform_fold_to_graph(
    fold: Fold | str | None,
    css: str,
    state: CompressionState | str = CompressionState.RAW,
    config: StylefoldConfig | None = None,
) -> FoldGraph:
    """Parse *css*, embed it, and fold the node set with *fold*.

    Raises :class:`~stylefold.validation.ValidationError` if the parsed
    stylesheet or the resulting graph breaks a structural invariant.
    """
    stylesheet = parse_stylesheet(css)
    validate_or_raise(stylesheet)

    graph = build_graph(stylesheet)
    nodes = apply_compression_calculus(graph.nodes, state, fold)
    folded = apply_fold(nodes, fold, config)

    edges = graph.edges
    if len(folded) != len(nodes):
        edges = remap_edges(nodes, folded, edges)
        logger.debug(
            "Remapped %d edge(s) onto %d folded node(s): %d kept",
            len(graph.edges),
            len(folded),
            len(edges),
        )

    result = FoldGraph(nodes=folded, edges=edges)
    validate_or_raise(result)
    return result

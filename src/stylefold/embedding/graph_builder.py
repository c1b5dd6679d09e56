"""Build the node/edge graph of an embedded stylesheet."""

from __future__ import annotations

from stylefold.embedding.embedder import embed_declaration, embed_selector
from stylefold.model.geometry import FoldGraph, Point
from stylefold.stylesheet.model import Stylesheet


def embed_stylesheet(stylesheet: Stylesheet) -> list[Point]:
    """Return the point set: selectors first, then declarations, in parse order."""
    points = [embed_selector(s) for s in stylesheet.selectors]
    points.extend(embed_declaration(d) for d in stylesheet.declarations)
    return points


def build_graph(stylesheet: Stylesheet) -> FoldGraph:
    """Connect selectors in a path and hang each declaration off its selector.

    For S selectors and D declarations the graph has S + D nodes and
    max(S - 1, 0) + D edges.
    """
    nodes = embed_stylesheet(stylesheet)
    edges: list[tuple[int, int]] = [
        (i - 1, i) for i in range(1, len(stylesheet.selectors))
    ]
    offset = len(stylesheet.selectors)
    for i, declaration in enumerate(stylesheet.declarations):
        edges.append((declaration.selector_index, offset + i))
    return FoldGraph(nodes=nodes, edges=edges)

"""Validation rules for stylesheets and embedded graphs.

Each rule is a function taking a Stylesheet or FoldGraph and returning a
list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

import math

from stylefold.model.diagnostic import Diagnostic, Severity
from stylefold.model.geometry import FoldGraph
from stylefold.stylesheet.model import Stylesheet


# ---------------------------------------------------------------------------
# Stylesheet rules
# ---------------------------------------------------------------------------


def check_selector_indices(stylesheet: Stylesheet) -> list[Diagnostic]:
    """Selector indices must be dense, 0-based, and in parse order."""
    diagnostics: list[Diagnostic] = []
    for position, selector in enumerate(stylesheet.selectors):
        if selector.index != position:
            diagnostics.append(
                Diagnostic.at_selector(
                    position,
                    rule="selector_indices",
                    severity=Severity.ERROR,
                    message=(
                        f"Selector {selector.text!r} has index {selector.index}, "
                        f"expected {position}"
                    ),
                )
            )
    return diagnostics


def check_declaration_references(stylesheet: Stylesheet) -> list[Diagnostic]:
    """Every declaration must reference an existing selector."""
    count = len(stylesheet.selectors)
    diagnostics: list[Diagnostic] = []
    for position, declaration in enumerate(stylesheet.declarations):
        if not 0 <= declaration.selector_index < count:
            diagnostics.append(
                Diagnostic.at_declaration(
                    position,
                    rule="declaration_references",
                    severity=Severity.ERROR,
                    message=(
                        f"Declaration {declaration.name!r} references selector "
                        f"{declaration.selector_index}, but only {count} exist"
                    ),
                )
            )
    return diagnostics


def check_empty_selectors(stylesheet: Stylesheet) -> list[Diagnostic]:
    """Selectors with blank text (e.g. a stray ``{ ... }``) are suspicious."""
    return [
        Diagnostic.at_selector(
            selector.index,
            rule="empty_selector",
            severity=Severity.WARNING,
            message="Rule block has an empty selector",
            fix="Add a selector before the opening brace",
        )
        for selector in stylesheet.selectors
        if not selector.text
    ]


# ---------------------------------------------------------------------------
# Graph rules
# ---------------------------------------------------------------------------


def check_edge_indices(graph: FoldGraph) -> list[Diagnostic]:
    """Every edge endpoint must be a valid node index."""
    count = len(graph.nodes)
    diagnostics: list[Diagnostic] = []
    for edge in graph.edges:
        frm, to = edge
        if not (0 <= frm < count and 0 <= to < count):
            diagnostics.append(
                Diagnostic.at_edge(
                    edge,
                    rule="edge_indices",
                    severity=Severity.ERROR,
                    message=f"Edge {frm}->{to} is dangling (graph has {count} node(s))",
                )
            )
    return diagnostics


def check_finite_nodes(graph: FoldGraph) -> list[Diagnostic]:
    """Node coordinates must be finite numbers."""
    return [
        Diagnostic.at_node(
            index,
            rule="finite_nodes",
            severity=Severity.ERROR,
            message=f"Node has non-finite coordinates ({x}, {y})",
        )
        for index, (x, y) in enumerate(graph.nodes)
        if not (math.isfinite(x) and math.isfinite(y))
    ]


def check_self_loops(graph: FoldGraph) -> list[Diagnostic]:
    return [
        Diagnostic.at_edge(
            (frm, to),
            rule="self_loops",
            severity=Severity.WARNING,
            message=f"Edge {frm}->{to} connects a node to itself",
        )
        for frm, to in graph.edges
        if frm == to
    ]


def check_duplicate_edges(graph: FoldGraph) -> list[Diagnostic]:
    seen: set[tuple[int, int]] = set()
    diagnostics: list[Diagnostic] = []
    for edge in graph.edges:
        if edge in seen:
            diagnostics.append(
                Diagnostic.at_edge(
                    edge,
                    rule="duplicate_edges",
                    severity=Severity.WARNING,
                    message=f"Edge {edge[0]}->{edge[1]} appears more than once",
                )
            )
        seen.add(edge)
    return diagnostics


STYLESHEET_RULES = [
    check_selector_indices,
    check_declaration_references,
    check_empty_selectors,
]

GRAPH_RULES = [
    check_edge_indices,
    check_finite_nodes,
    check_self_loops,
    check_duplicate_edges,
]

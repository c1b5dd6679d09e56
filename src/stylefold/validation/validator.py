"""Validators: run rule sets and report or raise on ERROR diagnostics."""

from __future__ import annotations

from typing import Callable

from stylefold.model.diagnostic import Diagnostic
from stylefold.model.geometry import FoldGraph
from stylefold.stylesheet.model import Stylesheet
from stylefold.validation.rules import GRAPH_RULES, STYLESHEET_RULES


class ValidationError(Exception):
    """Raised when validation produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


StylesheetRule = Callable[[Stylesheet], list[Diagnostic]]
GraphRule = Callable[[FoldGraph], list[Diagnostic]]


def validate_stylesheet(
    stylesheet: Stylesheet, extra_rules: list[StylesheetRule] | None = None
) -> list[Diagnostic]:
    """Run all stylesheet rules; returns every diagnostic found."""
    rules: list[StylesheetRule] = list(STYLESHEET_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(stylesheet))
    return diagnostics


def validate_graph(
    graph: FoldGraph, extra_rules: list[GraphRule] | None = None
) -> list[Diagnostic]:
    """Run all graph rules; returns every diagnostic found."""
    rules: list[GraphRule] = list(GRAPH_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(graph))
    return diagnostics


def _raise_on_errors(diagnostics: list[Diagnostic]) -> list[Diagnostic]:
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics


def validate_or_raise(target: Stylesheet | FoldGraph) -> list[Diagnostic]:
    """Validate a stylesheet or graph; raises :class:`ValidationError` on errors.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    if isinstance(target, Stylesheet):
        return _raise_on_errors(validate_stylesheet(target))
    return _raise_on_errors(validate_graph(target))

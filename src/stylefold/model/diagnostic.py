"""Findings reported by the stylesheet and graph validators.

A finding points at one place in the pipeline: a parsed selector, a parsed
declaration, an embedded graph node, or an edge between two nodes. The
three index-based places share one ``index`` field and are told apart by
``location``; edges carry their endpoint pair instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class LocationKind(Enum):
    """What a diagnostic's ``index`` counts into."""

    SELECTOR = "selector"
    DECLARATION = "declaration"
    NODE = "node"


@dataclass(frozen=True)
class Diagnostic:
    """A single validation finding.

    ``index`` is a position in ``Stylesheet.selectors``,
    ``Stylesheet.declarations`` or ``FoldGraph.nodes`` depending on
    ``location``. ``edge`` is set instead for findings about a graph edge.
    """

    rule: str
    severity: Severity
    message: str
    location: LocationKind | None = None
    index: int | None = None
    edge: tuple[int, int] | None = None
    fix: str | None = None

    @classmethod
    def at_selector(cls, index: int, **kwargs) -> Diagnostic:
        return cls(location=LocationKind.SELECTOR, index=index, **kwargs)

    @classmethod
    def at_declaration(cls, index: int, **kwargs) -> Diagnostic:
        return cls(location=LocationKind.DECLARATION, index=index, **kwargs)

    @classmethod
    def at_node(cls, index: int, **kwargs) -> Diagnostic:
        return cls(location=LocationKind.NODE, index=index, **kwargs)

    @classmethod
    def at_edge(cls, edge: tuple[int, int], **kwargs) -> Diagnostic:
        return cls(edge=edge, **kwargs)

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    @property
    def where(self) -> str:
        """Short location tag such as ``selector=0`` or ``edge=0->1``."""
        if self.location is not None and self.index is not None:
            return f"{self.location.value}={self.index}"
        if self.edge is not None:
            return f"edge={self.edge[0]}->{self.edge[1]}"
        return ""

    def __str__(self) -> str:
        where = self.where
        prefix = f"{self.severity.value} [{where}]" if where else self.severity.value
        return f"{prefix}: {self.message}"

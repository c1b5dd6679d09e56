"""Geometry model: Point alias and the FoldGraph node/edge container."""

from __future__ import annotations

from dataclasses import dataclass, field

Point = tuple[float, float]


@dataclass
class FoldGraph:
    """Embedded stylesheet graph: 2-D nodes plus index-based edges.

    Nodes hold selectors first, then declarations, in parse order.  Each
    edge is a ``(from_index, to_index)`` pair into ``nodes``.
    """

    nodes: list[Point] = field(default_factory=list)
    edges: list[tuple[int, int]] = field(default_factory=list)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def density(self) -> float:
        """Edges per node; an empty graph has density 0."""
        return len(self.edges) / max(1, len(self.nodes))

    def to_vectors(self) -> list[list[float]]:
        """Return the nodes as plain ``[x, y]`` vectors for a collapse primitive."""
        return [[x, y] for x, y in self.nodes]

    def neighbors(self, index: int) -> list[int]:
        """Return node indices reachable from *index* by one outgoing edge."""
        return [to for frm, to in self.edges if frm == index]

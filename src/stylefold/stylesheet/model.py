"""Stylesheet model: Selector, Declaration, and Stylesheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Selector:
    """A selector list as written before a rule block.

    ``index`` is the parse order (0-based, dense).  ``specificity`` is the
    weighted marker count: 100 per id, 10 per class/attribute/pseudo-class,
    1 per element/pseudo-element name.
    """

    text: str
    index: int
    specificity: int


@dataclass(frozen=True)
class Declaration:
    """A ``name: value`` pair owned by the selector at ``selector_index``."""

    name: str
    value: str
    selector_index: int


@dataclass(frozen=True)
class Stylesheet:
    """Parsed stylesheet: selectors and declarations, both in source order."""

    selectors: tuple[Selector, ...] = ()
    declarations: tuple[Declaration, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.selectors

    def declarations_for(self, selector_index: int) -> list[Declaration]:
        """Return the declarations owned by the selector at *selector_index*."""
        return [d for d in self.declarations if d.selector_index == selector_index]

    def rules(self) -> list[tuple[Selector, list[Declaration]]]:
        """Group declarations under their owning selector, in source order."""
        return [(s, self.declarations_for(s.index)) for s in self.selectors]

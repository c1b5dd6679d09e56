"""Deterministic placement of selectors, declarations, and text in the plane.

Every function here is a pure function of its string input: the same text
yields bit-identical coordinates anywhere in a document and across calls.
"""

from __future__ import annotations

import math

from stylefold.embedding.hashing import string_hash, utf16_length, utf16_units
from stylefold.model.geometry import Point
from stylefold.stylesheet.model import Declaration, Selector

_DEGREE = math.pi / 180


def embed_selector(selector: Selector) -> Point:
    """Place a selector on an ellipse-like path.

    The hash picks the angle; specificity sets the extent on x and the
    normalized text length sets the extent on y.
    """
    angle = (string_hash(selector.text) % 360) * _DEGREE
    complexity = utf16_length(selector.text) / 100
    return (selector.specificity * math.cos(angle), complexity * math.sin(angle))


def embed_declaration(declaration: Declaration) -> Point:
    """Place a declaration in the unit square from its name and value hashes."""
    x = (string_hash(declaration.name) % 100) / 100
    y = (string_hash(declaration.value) % 100) / 100
    return (x, y)


def text_to_vectors(text: str) -> list[Point]:
    """Spiral each character out from the origin by position, angled by code unit."""
    units = utf16_units(text)
    count = len(units)
    vectors: list[Point] = []
    for i, unit in enumerate(units):
        angle = (unit % 360) * _DEGREE
        radius = i / count
        vectors.append((radius * math.cos(angle), radius * math.sin(angle)))
    return vectors

"""Turn compression operations into vector sequences for a collapse primitive."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Mapping

from stylefold.embedding.embedder import text_to_vectors
from stylefold.model.geometry import Point


class OperationType(StrEnum):
    COMPRESS = "compress"
    DECOMPRESS = "decompress"
    OPTIMIZE = "optimize"
    TRANSFORM = "transform"


@dataclass(frozen=True)
class CompressionOperation:
    """A compression step: its kind, its input, and numeric parameters."""

    type: OperationType | str
    input: Any = None
    parameters: Mapping[str, Any] = field(default_factory=dict)


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def _item_to_vector(item: Any) -> Point:
    if isinstance(item, Mapping):
        return (_number(item.get("x", 0)), _number(item.get("y", 0)))
    if isinstance(item, (list, tuple)):
        x = item[0] if len(item) > 0 else 0
        y = item[1] if len(item) > 1 else 0
        return (_number(x), _number(y))
    return (0.0, 0.0)


def input_to_vectors(value: Any) -> list[Point]:
    """Vectorize an operation input.

    Strings use :func:`text_to_vectors`; sequences map each item to
    ``(x, y)``; mappings give one ``(value, 0)`` per entry; anything else is
    a single origin vector.
    """
    if isinstance(value, str):
        return text_to_vectors(value)
    if isinstance(value, (list, tuple)):
        return [_item_to_vector(item) for item in value]
    if isinstance(value, Mapping):
        return [(_number(v), 0.0) for v in value.values()]
    return [(0.0, 0.0)]


def parameters_to_vectors(parameters: Mapping[str, Any] | None) -> list[Point]:
    if not parameters:
        return []
    return [(_number(v), 0.0) for v in parameters.values()]


def operation_to_vectors(operation: CompressionOperation) -> list[Point]:
    """Combine input and parameter vectors according to the operation type."""
    inputs = input_to_vectors(operation.input)
    params = parameters_to_vectors(operation.parameters)

    try:
        kind = OperationType(operation.type)
    except ValueError:
        return inputs

    if kind is OperationType.COMPRESS:
        return inputs + params
    if kind is OperationType.DECOMPRESS:
        return [(-x, -y) for x, y in inputs]
    if kind is OperationType.OPTIMIZE:
        if not params:
            return inputs
        weight = params[0][0]
        return [(x * weight, y * weight) for x, y in inputs]
    return inputs

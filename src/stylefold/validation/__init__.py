from stylefold.validation.validator import (
    ValidationError,
    validate_graph,
    validate_or_raise,
    validate_stylesheet,
)

__all__ = ["ValidationError", "validate_graph", "validate_stylesheet", "validate_or_raise"]

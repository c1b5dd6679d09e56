"""Stylefold model layer -- public type re-exports."""

from stylefold.model.diagnostic import Diagnostic, LocationKind, Severity
from stylefold.model.fold import CompressionState, Fold, parse_fold
from stylefold.model.geometry import FoldGraph, Point

__all__ = [
    # geometry
    "Point",
    "FoldGraph",
    # fold
    "Fold",
    "CompressionState",
    "parse_fold",
    # diagnostic
    "Severity",
    "LocationKind",
    "Diagnostic",
]

from stylefold.analysis.geometric import (
    angle_variance,
    centroid,
    clustering_score,
    spread,
    symmetry_score,
    variance,
)
from stylefold.analysis.reports import compression_report, geometric_report, structural_report
from stylefold.analysis.structural import declaration_distribution, specificity_range

__all__ = [
    "centroid",
    "spread",
    "variance",
    "angle_variance",
    "symmetry_score",
    "clustering_score",
    "specificity_range",
    "declaration_distribution",
    "structural_report",
    "geometric_report",
    "compression_report",
]

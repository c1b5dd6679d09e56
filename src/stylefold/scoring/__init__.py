from stylefold.scoring.collapse import AngularCollapser, Collapser
from stylefold.scoring.efficiency import compression_efficiency, compression_ratio
from stylefold.scoring.operations import (
    CompressionOperation,
    OperationType,
    operation_to_vectors,
)

__all__ = [
    "Collapser",
    "AngularCollapser",
    "compression_efficiency",
    "compression_ratio",
    "CompressionOperation",
    "OperationType",
    "operation_to_vectors",
]

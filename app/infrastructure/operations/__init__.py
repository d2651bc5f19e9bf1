"""Operation result types and status enums.

This module contains the standardized result type returned by lookups,
including the status enum and the result dataclass.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]

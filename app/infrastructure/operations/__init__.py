"""Operation result types and status enums.

Standardized result types returned by infrastructure clients so callers can
branch on outcome without catching provider exceptions.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]

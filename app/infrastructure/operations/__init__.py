"""Operation result types and status enums.

Standardized result types shared by the member group operations and the
HTTP layer that turns them into responses.
"""

from infrastructure.operations.result import (
    OperationError,
    OperationResult,
    http_status_for,
)
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationError",
    "OperationResult",
    "OperationStatus",
    "http_status_for",
]

"""Operation result dataclass.

Uniform result type returned by member group operations. Failures carry a
list of structured errors so the HTTP boundary can surface diagnostics
instead of collapsing them into a bare status code.
"""

from typing import Any, List, Optional
from dataclasses import dataclass, field

from infrastructure.operations.status import (
    HTTP_STATUS_BY_OPERATION_STATUS,
    OperationStatus,
)


@dataclass(frozen=True)
class OperationError:
    """A single machine readable error detail.

    Attributes:
        code: Stable error code (e.g. ``DuplicateRoleName``)
        description: Human-friendly description
    """

    code: str
    description: str = ""


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- optional payload
        error_code: Optional[str] -- optional machine error code
        errors: List[OperationError] -- structured error details
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    errors: List[OperationError] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        """True if status is SUCCESS."""
        return self.status == OperationStatus.SUCCESS

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        """Create a SUCCESS OperationResult with optional data.

        Args:
            data: Optional payload to include with the result
            message: Human-friendly success message

        Returns:
            OperationResult with SUCCESS status
        """
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        errors: Optional[List[OperationError]] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            errors: Optional structured error details
            data: Optional payload to include with the error

        Returns:
            OperationResult with specified error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            errors=list(errors or []),
            data=data,
        )

    @classmethod
    def not_found(
        cls, message: str = "Not found", error_code: Optional[str] = "NOT_FOUND"
    ) -> "OperationResult":
        """Create a NOT_FOUND result."""
        return cls.error(OperationStatus.NOT_FOUND, message, error_code)

    @classmethod
    def permanent_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        errors: Optional[List[OperationError]] = None,
    ) -> "OperationResult":
        """Create a permanent (non-retryable) error result.

        Use when a backing store rejected the operation, such as a failed
        role update or deletion.

        Args:
            message: Human-friendly error message
            error_code: Optional machine error code
            errors: Structured details reported by the store

        Returns:
            OperationResult with PERMANENT_ERROR status
        """
        return cls.error(OperationStatus.PERMANENT_ERROR, message, error_code, errors)


def http_status_for(result: OperationResult) -> int:
    """Map an OperationResult to the HTTP status code returned to callers."""
    return HTTP_STATUS_BY_OPERATION_STATUS.get(result.status, 500)

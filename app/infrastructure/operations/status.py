"""Operation status enumeration.

Classifies the outcome of a member group operation so the HTTP layer can
pick a status code without inspecting messages.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        NOT_FOUND: The identifier did not resolve in a required store
        VALIDATION_ERROR: Input was rejected before reaching a store
        PERMANENT_ERROR: A store rejected the operation (server failure)
        TRANSIENT_ERROR: A store was temporarily unavailable
    """

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    PERMANENT_ERROR = "permanent_error"
    TRANSIENT_ERROR = "transient_error"


HTTP_STATUS_BY_OPERATION_STATUS = {
    OperationStatus.SUCCESS: 200,
    OperationStatus.NOT_FOUND: 404,
    OperationStatus.VALIDATION_ERROR: 400,
    OperationStatus.PERMANENT_ERROR: 500,
    OperationStatus.TRANSIENT_ERROR: 503,
}

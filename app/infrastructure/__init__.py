"""Infrastructure modules for the Member Groups API.

Centralized infrastructure components:
- i18n: Localization of user-facing messages
- operations: Operation results and HTTP status mapping
"""

# i18n
from infrastructure.i18n import Locale, LocaleResolver, Translator, create_translator

# Operations
from infrastructure.operations import (
    OperationError,
    OperationResult,
    OperationStatus,
    http_status_for,
)

__all__ = [
    # i18n
    "Locale",
    "LocaleResolver",
    "Translator",
    "create_translator",
    # Operations
    "OperationError",
    "OperationResult",
    "OperationStatus",
    "http_status_for",
]

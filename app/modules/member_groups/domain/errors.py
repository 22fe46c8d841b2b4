"""Errors for the member groups module."""


class MemberGroupError(Exception):
    """Base class for member group errors."""


class InvalidIdentifierError(MemberGroupError, ValueError):
    """Raised when a raw id is not an integer, GUID or UDI.

    Attributes:
        raw: the value that failed to parse
        reason: short explanation of why it was rejected
    """

    def __init__(self, raw: str, reason: str = ""):
        message = f"Invalid member group identifier: {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.raw = raw
        self.reason = reason


class SeedFileError(MemberGroupError):
    """Raised when the member group seed file cannot be loaded."""

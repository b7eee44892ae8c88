"""Domain-specific exceptions for trusty."""

from typing import Iterable, Optional

from .base import TrustyError


# Configuration Errors
class ConfigurationError(TrustyError):
    """Raised when there's a configuration issue."""
    pass


# Validation Errors
class ValidationError(TrustyError):
    """Base class for input and data validation errors."""
    pass


class InvalidRequestError(ValidationError):
    """Raised when a decision request is missing required fields."""

    def __init__(
        self,
        message: str = "Invalid request",
        fields: Optional[Iterable[str]] = None,
    ):
        super().__init__(message, "INVALID_REQUEST")
        self.fields = list(fields or [])
        if self.fields:
            self.details["fields"] = self.fields


class InvalidPatternError(ValidationError):
    """Raised when a stored permission cannot be parsed."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"Invalid permission pattern '{pattern}': {reason}",
            "INVALID_PATTERN",
            {"pattern": pattern, "reason": reason},
        )


# Directory Store Errors
class DirectoryStoreError(TrustyError):
    """Base class for directory store errors."""
    pass


class StoreUnavailableError(DirectoryStoreError):
    """Raised when the directory store cannot answer a query.

    Distinct from a denied decision: the caller must not read this as
    ``result=False``.
    """

    def __init__(self, message: str = "Directory store unavailable", operation: Optional[str] = None):
        super().__init__(message, "STORE_UNAVAILABLE")
        self.operation = operation
        if operation:
            self.details["operation"] = operation

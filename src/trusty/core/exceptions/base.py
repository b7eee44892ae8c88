"""Base exceptions for trusty.

Every error raised by the service inherits from TrustyError and carries an
error code and a details mapping so the transport layer can render a
structured response without knowing the concrete exception type.
"""

from typing import Any, Dict, Optional


class TrustyError(Exception):
    """Base exception for all trusty errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: TrustyError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The trusty exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }

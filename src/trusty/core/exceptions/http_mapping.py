"""HTTP status code mapping for exceptions.

The lookup walks the exception's MRO so subclasses inherit the status of
their closest mapped ancestor.
"""

from typing import Dict, Type

from .base import TrustyError
from .domain import (
    ConfigurationError,
    ValidationError,
    InvalidRequestError,
    InvalidPatternError,
    DirectoryStoreError,
    StoreUnavailableError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    InvalidRequestError: 400,

    # 500 Internal Server Error
    InvalidPatternError: 500,
    ConfigurationError: 500,
    DirectoryStoreError: 500,

    # 503 Service Unavailable
    StoreUnavailableError: 503,

    # Default for TrustyError
    TrustyError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code, 500 when nothing in the MRO is mapped
    """
    for exc_type in type(exception).__mro__:
        if exc_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_type]
    return 500

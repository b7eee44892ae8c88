"""Exception hierarchy for trusty."""

from .base import TrustyError, create_error_response, get_http_status_code
from .domain import (
    ConfigurationError,
    ValidationError,
    InvalidRequestError,
    InvalidPatternError,
    DirectoryStoreError,
    StoreUnavailableError,
)
from .http_mapping import HTTP_STATUS_MAP

__all__ = [
    # Base
    "TrustyError",
    "create_error_response",
    "get_http_status_code",
    "HTTP_STATUS_MAP",

    # Domain
    "ConfigurationError",
    "ValidationError",
    "InvalidRequestError",
    "InvalidPatternError",
    "DirectoryStoreError",
    "StoreUnavailableError",
]

"""Configuration for trusty."""

from .settings import TrustySettings, get_settings
from .logging_config import setup_logging

__all__ = [
    "TrustySettings",
    "get_settings",
    "setup_logging",
]

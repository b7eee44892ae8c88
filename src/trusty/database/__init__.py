"""Database access for trusty."""

from .connection import DatabaseManager

__all__ = ["DatabaseManager"]

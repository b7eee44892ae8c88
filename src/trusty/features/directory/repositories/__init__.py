"""Directory store repository implementations."""

from .asyncpg_directory_store import AsyncPGDirectoryStore

__all__ = ["AsyncPGDirectoryStore"]

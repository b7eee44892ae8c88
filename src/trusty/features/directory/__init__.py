"""Directory feature for trusty.

Read-only access to tenants, users, roles and permissions:
- repositories/: DirectoryStore implementations
"""

from .repositories import AsyncPGDirectoryStore

__all__ = ["AsyncPGDirectoryStore"]

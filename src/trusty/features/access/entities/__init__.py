"""Access entities package.

Domain entities, request models and protocols for access decisions.
"""

from .permission import Permission, WILDCARD_ACTION
from .role import Role, RoleId
from .requests import IsAllowedRequest, IsAllowedResult
from .protocols import DirectoryStore

__all__ = [
    # Domain entities
    "Permission",
    "Role",
    "RoleId",
    "WILDCARD_ACTION",

    # Request models
    "IsAllowedRequest",
    "IsAllowedResult",

    # Protocols
    "DirectoryStore",
]

"""Trusty - role-based access-control decision service.

Given an actor, a namespace and a requested action/resource, trusty decides
whether any role assigned to the actor in that namespace grants the request.
"""

from .__version__ import __version__

from .core.exceptions import (
    TrustyError,
    InvalidRequestError,
    StoreUnavailableError,
)
from .features.access import (
    AccessDecisionEngine,
    DirectoryStore,
    IsAllowedRequest,
    IsAllowedResult,
    Permission,
    PermissionMatcher,
    Role,
    RoleId,
    RoleResolver,
)

__all__ = [
    "__version__",

    # Exceptions
    "TrustyError",
    "InvalidRequestError",
    "StoreUnavailableError",

    # Access decisions
    "AccessDecisionEngine",
    "DirectoryStore",
    "IsAllowedRequest",
    "IsAllowedResult",
    "Permission",
    "PermissionMatcher",
    "Role",
    "RoleId",
    "RoleResolver",
]

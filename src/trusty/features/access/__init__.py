"""Access feature for trusty.

Feature-First architecture for access decisions:
- entities/: Roles, permissions, request models and the directory protocol
- matching/: Resource pattern and permission matching
- services/: Role resolution and the decision engine
- routers/: HTTP endpoints
"""

# Core access entities and protocols
from .entities import (
    Permission, Role, RoleId,
    IsAllowedRequest, IsAllowedResult,
    DirectoryStore,
)

# Matching
from .matching import PermissionMatcher, ResourcePattern

# Decision services
from .services import AccessDecisionEngine, RoleResolver, create_decision_engine

__all__ = [
    # Entities
    "Permission",
    "Role",
    "RoleId",
    "IsAllowedRequest",
    "IsAllowedResult",

    # Protocols
    "DirectoryStore",

    # Matching
    "PermissionMatcher",
    "ResourcePattern",

    # Services
    "AccessDecisionEngine",
    "RoleResolver",
    "create_decision_engine",
]

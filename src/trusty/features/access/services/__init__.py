"""Access decision services."""

from .role_resolver import RoleResolver
from .decision_engine import AccessDecisionEngine, create_decision_engine

__all__ = [
    "RoleResolver",
    "AccessDecisionEngine",
    "create_decision_engine",
]

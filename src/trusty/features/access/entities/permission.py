"""Permission domain entity for the access feature.

A permission grants an action on every resource matched by its pattern.
Stored in the role_permissions table of the directory schema.
"""

from dataclasses import dataclass

WILDCARD_ACTION = "*"


@dataclass(frozen=True)
class Permission:
    """Immutable ``(action, resource-pattern)`` grant statement."""

    action: str
    resource: str

    def __str__(self) -> str:
        return f"{self.action}:{self.resource}"

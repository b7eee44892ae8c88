"""Role domain entity for the access feature.

A role bundles permissions and belongs to exactly one (tenant, namespace)
pair. It only takes part in decisions for requests of its own namespace.
"""

from dataclasses import dataclass, field
from typing import NewType, Optional, Tuple

from .permission import Permission

RoleId = NewType("RoleId", str)


@dataclass
class Role:
    """Domain entity representing a namespace-scoped bundle of permissions."""

    id: RoleId
    namespace: str
    tenant_id: Optional[str] = None
    name: Optional[str] = None
    permissions: Tuple[Permission, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Rows and fixtures hand in lists
        if not isinstance(self.permissions, tuple):
            self.permissions = tuple(self.permissions)

    def has_permissions(self) -> bool:
        """Check if the role grants anything at all."""
        return len(self.permissions) > 0

    def in_namespace(self, namespace: str) -> bool:
        """Check if the role is scoped to the given namespace."""
        return self.namespace == namespace

    def __str__(self) -> str:
        return f"Role({self.id})"

    def __repr__(self) -> str:
        return (
            f"Role({self.id}, namespace={self.namespace}, tenant={self.tenant_id}, "
            f"permissions={len(self.permissions)})"
        )

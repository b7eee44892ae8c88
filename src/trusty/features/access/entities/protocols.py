"""Protocols for the access feature.

The decision engine only depends on these interfaces; concrete stores are
selected when the application starts.
"""

from typing import Protocol, Set, runtime_checkable

from .requests import IsAllowedRequest
from .role import RoleId


@runtime_checkable
class DirectoryStore(Protocol):
    """Read-only view of the directory used by the decision engine."""

    async def get_role_ids_for_user(self, external_user_id: str) -> Set[RoleId]:
        """Get ids of every role assigned to the user, across tenants.

        Returns an empty set for unknown users. Raises StoreUnavailableError
        when the store cannot be queried.
        """
        ...

    async def get_roles_matching_request(
        self,
        role_ids: Set[RoleId],
        request: IsAllowedRequest,
        namespace: str,
    ) -> Set[RoleId]:
        """Get the subset of role_ids that grant the request within namespace.

        Raises StoreUnavailableError when the store cannot be queried.
        """
        ...

"""
Permission Matcher for Trusty

Decides which of a user's roles grant a requested action on a resource
within a namespace. Roles never subtract access, so the matcher only needs
to find roles with at least one matching permission.
"""
from typing import Iterable, Optional, Set

from loguru import logger

from ....core.exceptions import InvalidPatternError
from ..entities import Permission, Role, RoleId, WILDCARD_ACTION
from .resource_pattern import ResourcePattern


class PermissionMatcher:
    """
    Default implementation of role/permission matching.

    Supports:
    - Exact actions: "read" matches only "read" (case-sensitive)
    - Wildcard action: "*" matches any action
    - Resource patterns: see ResourcePattern
    """

    def __init__(self):
        """Initialize the permission matcher."""
        logger.debug("Initialized PermissionMatcher")

    def action_matches(self, granted_action: str, requested_action: str) -> bool:
        """
        Check if a granted action covers the requested action.

        Args:
            granted_action: Action stored on the permission (may be "*")
            requested_action: Action being requested

        Returns:
            True for the wildcard action or an exact, case-sensitive match
        """
        return granted_action == WILDCARD_ACTION or granted_action == requested_action

    def permission_matches(self, permission: Permission, action: str, resource: str) -> bool:
        """
        Check if a single permission grants action on resource.

        Malformed permissions never match; they are logged and skipped.

        Args:
            permission: Granted permission
            action: Requested action
            resource: Requested resource path

        Returns:
            True if both action and resource match
        """
        if not permission.action:
            logger.warning(f"Ignoring permission with empty action: {permission}")
            return False

        if not self.action_matches(permission.action, action):
            return False

        pattern = self._get_pattern(permission.resource)
        return pattern is not None and pattern.matches(resource)

    def role_matches(self, role: Role, namespace: str, action: str, resource: str) -> bool:
        """
        Check if a role grants the request within namespace.

        Args:
            role: Role to evaluate
            namespace: Namespace of the request
            action: Requested action
            resource: Requested resource path

        Returns:
            True if the role is in namespace and any of its permissions match
        """
        if not role.in_namespace(namespace):
            return False

        if not role.has_permissions():
            return False

        for permission in role.permissions:
            if self.permission_matches(permission, action, resource):
                logger.debug(f"Role {role.id} grants {action} on {resource} via '{permission}'")
                return True

        return False

    def match(
        self,
        roles: Iterable[Role],
        namespace: str,
        action: str,
        resource: str
    ) -> Set[RoleId]:
        """
        Get the ids of all roles that grant the request.

        Args:
            roles: Candidate roles
            namespace: Namespace of the request
            action: Requested action
            resource: Requested resource path

        Returns:
            Set of matching role ids (unordered)
        """
        return {
            role.id
            for role in roles
            if self.role_matches(role, namespace, action, resource)
        }

    def _get_pattern(self, raw: str) -> Optional[ResourcePattern]:
        """Parse a stored resource pattern, returning None for malformed ones."""
        try:
            return ResourcePattern.parse(raw)
        except InvalidPatternError as e:
            logger.warning(f"Ignoring permission with invalid resource pattern: {e.message}")
            return None


# Factory function for dependency injection
def create_permission_matcher() -> PermissionMatcher:
    """
    Create a permission matcher instance.

    Returns:
        Configured PermissionMatcher instance
    """
    return PermissionMatcher()


__all__ = [
    "PermissionMatcher",
    "create_permission_matcher",
]

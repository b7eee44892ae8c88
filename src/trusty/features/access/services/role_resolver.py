"""Role resolution for access decisions."""

from typing import Set

from loguru import logger

from ....core.exceptions import StoreUnavailableError, TrustyError
from ..entities import DirectoryStore, RoleId


class RoleResolver:
    """Resolves the roles assigned to an actor, independent of namespace."""

    def __init__(self, store: DirectoryStore):
        self.store = store

    async def resolve(self, external_user_id: str) -> Set[RoleId]:
        """
        Get the deduplicated role ids assigned to a user across all tenants.

        Args:
            external_user_id: Actor id from the upstream identity provider

        Returns:
            Set of role ids, empty for unknown users

        Raises:
            StoreUnavailableError: If the directory store cannot be queried
        """
        try:
            role_ids = await self.store.get_role_ids_for_user(external_user_id)
        except TrustyError:
            raise
        except Exception as e:
            logger.error(f"Role lookup failed for user {external_user_id}: {e}")
            raise StoreUnavailableError(
                f"Role lookup failed: {e}", operation="get_role_ids_for_user"
            ) from e

        role_ids = set(role_ids or ())
        logger.debug(f"Resolved {len(role_ids)} roles for user {external_user_id}")
        return role_ids

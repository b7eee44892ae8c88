"""AsyncPG-based directory store implementation.

Read-only implementation of the DirectoryStore protocol over PostgreSQL.
Expected tables in the configured schema:

- users(id uuid, external_user_id, deleted_at)
- user_roles(user_id, role_id)
- roles(id uuid, tenant_id, namespace, name, deleted_at)
- role_permissions(role_id, action, resource)

Role/permission matching is done in Python by the PermissionMatcher on the
rows loaded for the requested roles. Role ids travel as their text form and
are bound as uuid[] so lookups stay on the roles primary key.
"""

import re
from typing import Dict, Iterable, List, Optional, Set

from loguru import logger

from ....core.exceptions import ConfigurationError, StoreUnavailableError, TrustyError
from ....database import DatabaseManager
from ...access.entities import IsAllowedRequest, Permission, Role, RoleId
from ...access.matching import PermissionMatcher

_SCHEMA_NAME_RE = re.compile(r"^[a-z_][a-z0-9_]{0,62}$")


class AsyncPGDirectoryStore:
    """AsyncPG implementation of DirectoryStore protocol."""

    def __init__(
        self,
        database: DatabaseManager,
        schema: str = "trusty",
        matcher: Optional[PermissionMatcher] = None
    ):
        """Initialize with database manager and directory schema."""
        self.database = database
        self.schema = self._validate_schema_name(schema)
        self.matcher = matcher or PermissionMatcher()

    def _validate_schema_name(self, schema_name: str) -> str:
        """Validate schema name to prevent SQL injection."""
        if not isinstance(schema_name, str) or not _SCHEMA_NAME_RE.match(schema_name):
            raise ConfigurationError(f"Invalid schema name: {schema_name!r}")
        return schema_name

    async def get_role_ids_for_user(self, external_user_id: str) -> Set[RoleId]:
        """Get ids of every role assigned to the user, across all tenants."""
        query = f"""
            SELECT DISTINCT ur.role_id::text AS role_id
            FROM {self.schema}.user_roles ur
            JOIN {self.schema}.users u ON u.id = ur.user_id
            WHERE u.external_user_id = $1
            AND u.deleted_at IS NULL
        """

        try:
            rows = await self.database.fetch(query, external_user_id)
        except TrustyError:
            raise
        except Exception as e:
            logger.error(f"Failed to get role ids for user {external_user_id} from {self.schema}: {e}")
            raise StoreUnavailableError(
                f"Failed to retrieve user roles: {e}", operation="get_role_ids_for_user"
            ) from e

        role_ids = {RoleId(row["role_id"]) for row in rows}
        logger.debug(f"Found {len(role_ids)} roles for user {external_user_id} in {self.schema}")
        return role_ids

    async def get_roles(self, role_ids: Iterable[RoleId], namespace: str) -> List[Role]:
        """Load the given roles of a namespace with their permissions."""
        ids = sorted(set(role_ids))
        if not ids:
            return []

        query = f"""
            SELECT r.id::text AS role_id, r.tenant_id::text AS tenant_id,
                   r.namespace, r.name, rp.action, rp.resource
            FROM {self.schema}.roles r
            LEFT JOIN {self.schema}.role_permissions rp ON rp.role_id = r.id
            WHERE r.id = ANY($1::uuid[])
            AND r.namespace = $2
            AND r.deleted_at IS NULL
            ORDER BY r.id
        """

        try:
            rows = await self.database.fetch(query, ids, namespace)
        except TrustyError:
            raise
        except Exception as e:
            logger.error(f"Failed to load roles in namespace {namespace} from {self.schema}: {e}")
            raise StoreUnavailableError(
                f"Failed to retrieve roles: {e}", operation="get_roles_matching_request"
            ) from e

        return self._build_roles_from_rows(rows)

    async def get_roles_matching_request(
        self,
        role_ids: Set[RoleId],
        request: IsAllowedRequest,
        namespace: str
    ) -> Set[RoleId]:
        """Get the subset of role_ids that grant the request within namespace."""
        roles = await self.get_roles(role_ids, namespace)
        matching = self.matcher.match(roles, namespace, request.action, request.resource)
        logger.debug(f"{len(matching)} of {len(roles)} roles in {namespace} grant {request.action} on {request.resource}")
        return matching & set(role_ids)

    async def health_check(self) -> bool:
        """Check that the directory database is reachable."""
        return await self.database.health_check()

    def _build_roles_from_rows(self, rows) -> List[Role]:
        """Group joined role/permission rows into Role entities."""
        roles: Dict[str, Role] = {}
        permissions: Dict[str, List[Permission]] = {}

        for row in rows:
            role_id = row["role_id"]
            if role_id not in roles:
                roles[role_id] = Role(
                    id=RoleId(role_id),
                    namespace=row["namespace"],
                    tenant_id=row["tenant_id"],
                    name=row["name"],
                )
                permissions[role_id] = []

            # LEFT JOIN yields a NULL permission row for roles without permissions
            if row["action"] is not None and row["resource"] is not None:
                permissions[role_id].append(Permission(action=row["action"], resource=row["resource"]))

        for role_id, role in roles.items():
            role.permissions = tuple(permissions[role_id])

        return list(roles.values())

"""
Access Decision Engine for Trusty

Answers "is this actor allowed to perform this action on this resource in
this namespace?" by resolving the actor's roles and asking the directory
which of them grant the request. Decisions are allow-if-any-match.

The engine holds no mutable state: concurrent decisions share nothing but
the directory store, and the only suspension points are the two store calls.
"""
from typing import List, Optional

from loguru import logger

from ....core.exceptions import InvalidRequestError, StoreUnavailableError, TrustyError
from ..entities import DirectoryStore, IsAllowedRequest, IsAllowedResult
from .role_resolver import RoleResolver

REQUIRED_FIELDS = ("external_user_id", "namespace", "action", "resource")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not isinstance(value, str) or not value.strip()


class AccessDecisionEngine:
    """
    Default implementation of the access decision pipeline.

    validate -> resolve roles -> match roles within namespace -> reduce
    """

    def __init__(self, store: DirectoryStore, role_resolver: Optional[RoleResolver] = None):
        """
        Initialize access decision engine.

        Args:
            store: Directory store to read roles and permissions from
            role_resolver: Optional resolver, defaults to one over store
        """
        self.store = store
        self.role_resolver = role_resolver or RoleResolver(store)
        logger.info("Initialized AccessDecisionEngine")

    def validate_request(self, request: IsAllowedRequest, namespace: Optional[str] = None) -> str:
        """
        Check request shape before any store access.

        Args:
            request: Decision request
            namespace: Optional explicit namespace scope

        Returns:
            The namespace to evaluate the request in

        Raises:
            InvalidRequestError: If a required field is empty or the explicit
                namespace disagrees with the request's namespace
        """
        if request is None:
            raise InvalidRequestError("Request is required", fields=list(REQUIRED_FIELDS))

        scope = request.namespace if namespace is None else namespace
        values = {
            "external_user_id": request.external_user_id,
            "namespace": scope,
            "action": request.action,
            "resource": request.resource,
        }
        missing: List[str] = [name for name in REQUIRED_FIELDS if _is_blank(values[name])]
        if missing:
            raise InvalidRequestError(
                f"Missing required field(s): {', '.join(missing)}", fields=missing
            )

        # An explicit scope may stand in for an empty request namespace, never override it
        if not _is_blank(request.namespace) and request.namespace != scope:
            raise InvalidRequestError(
                f"Namespace mismatch: request is scoped to '{request.namespace}', "
                f"evaluation requested in '{scope}'",
                fields=["namespace"],
            )

        return scope

    async def is_allowed(
        self,
        request: IsAllowedRequest,
        namespace: Optional[str] = None
    ) -> IsAllowedResult:
        """
        Decide whether the request is allowed.

        Args:
            request: Decision request
            namespace: Optional namespace scope, defaults to request.namespace

        Returns:
            IsAllowedResult with result=True if any role grants the request

        Raises:
            InvalidRequestError: If the request is malformed (no store access made)
            StoreUnavailableError: If the directory store cannot be queried
        """
        scope = self.validate_request(request, namespace)

        role_ids = await self.role_resolver.resolve(request.external_user_id)
        if not role_ids:
            logger.debug(f"Denied {request.action} on {request.resource} for user {request.external_user_id}: no roles")
            return IsAllowedResult(result=False)

        try:
            matching_roles = await self.store.get_roles_matching_request(role_ids, request, scope)
        except TrustyError:
            raise
        except Exception as e:
            logger.error(f"Role matching failed for user {request.external_user_id}: {e}")
            raise StoreUnavailableError(
                f"Role matching failed: {e}", operation="get_roles_matching_request"
            ) from e

        allowed = bool(matching_roles)
        logger.debug(
            f"{'Allowed' if allowed else 'Denied'} {request.action} on {request.resource} "
            f"in {scope} for user {request.external_user_id}"
        )
        return IsAllowedResult(result=allowed)


# Factory function for dependency injection
def create_decision_engine(store: DirectoryStore) -> AccessDecisionEngine:
    """
    Create an access decision engine over a directory store.

    Args:
        store: Directory store implementation selected at startup

    Returns:
        Configured AccessDecisionEngine instance
    """
    return AccessDecisionEngine(store)

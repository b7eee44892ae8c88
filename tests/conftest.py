"""Pytest configuration and fixtures for trusty tests."""

from typing import Dict, Iterable, List, Optional, Set

import pytest
from unittest.mock import AsyncMock, MagicMock

from trusty.core.exceptions import StoreUnavailableError
from trusty.features.access.entities import IsAllowedRequest, Permission, Role, RoleId
from trusty.features.access.matching import PermissionMatcher


class InMemoryDirectoryStore:
    """Directory store double backed by dictionaries.

    Counts calls to both store operations and can be switched into a
    failing mode to simulate an outage.
    """

    def __init__(self, roles: Optional[Iterable[Role]] = None, assignments: Optional[Dict[str, List[str]]] = None):
        self.roles: Dict[str, Role] = {role.id: role for role in roles or []}
        self.assignments: Dict[str, List[str]] = dict(assignments or {})
        self.matcher = PermissionMatcher()
        self.role_lookups = 0
        self.match_lookups = 0
        self.fail_role_lookup = False
        self.fail_match_lookup = False

    @property
    def calls(self) -> int:
        return self.role_lookups + self.match_lookups

    async def get_role_ids_for_user(self, external_user_id: str) -> Set[RoleId]:
        self.role_lookups += 1
        if self.fail_role_lookup:
            raise StoreUnavailableError("connection refused", operation="get_role_ids_for_user")
        return {RoleId(role_id) for role_id in self.assignments.get(external_user_id, [])}

    async def get_roles_matching_request(
        self,
        role_ids: Set[RoleId],
        request: IsAllowedRequest,
        namespace: str,
    ) -> Set[RoleId]:
        self.match_lookups += 1
        if self.fail_match_lookup:
            raise StoreUnavailableError("query timed out", operation="get_roles_matching_request")
        roles = [self.roles[role_id] for role_id in role_ids if role_id in self.roles]
        return self.matcher.match(roles, namespace, request.action, request.resource)


@pytest.fixture
def billing_reader_role():
    """Role r1: read invoices/* in the billing namespace."""
    return Role(
        id=RoleId("r1"),
        namespace="billing",
        tenant_id="t1",
        name="invoice-reader",
        permissions=[Permission(action="read", resource="invoices/*")],
    )


@pytest.fixture
def directory_store(billing_reader_role):
    """In-memory store where u1 holds r1."""
    return InMemoryDirectoryStore(
        roles=[billing_reader_role],
        assignments={"u1": ["r1"]},
    )


@pytest.fixture
def empty_directory_store():
    """In-memory store without users or roles."""
    return InMemoryDirectoryStore()


@pytest.fixture
def mock_directory_store():
    """DirectoryStore mock with async operations."""
    store = MagicMock()
    store.get_role_ids_for_user = AsyncMock(return_value=set())
    store.get_roles_matching_request = AsyncMock(return_value=set())
    return store


@pytest.fixture
def mock_database():
    """Mock DatabaseManager."""
    database = AsyncMock()
    database.fetch = AsyncMock(return_value=[])
    database.fetchval = AsyncMock(return_value=1)
    database.health_check = AsyncMock(return_value=True)
    return database


def make_request(**overrides) -> IsAllowedRequest:
    """Build a decision request for u1 reading invoices/123 in billing."""
    values = {
        "external_user_id": "u1",
        "namespace": "billing",
        "action": "read",
        "resource": "invoices/123",
    }
    values.update(overrides)
    return IsAllowedRequest(**values)


@pytest.fixture
def request_factory():
    """Factory for decision requests with per-test overrides."""
    return make_request


@pytest.fixture
def store_factory():
    """Factory for in-memory directory stores."""
    return InMemoryDirectoryStore

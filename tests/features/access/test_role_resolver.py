"""
Tests for role resolver.
"""

import pytest
from unittest.mock import AsyncMock

from trusty.core.exceptions import StoreUnavailableError
from trusty.features.access.services import RoleResolver


@pytest.mark.asyncio
async def test_resolve_returns_assigned_roles(directory_store):
    """Test roles assigned to a known user are returned."""
    resolver = RoleResolver(directory_store)

    role_ids = await resolver.resolve("u1")

    assert role_ids == {"r1"}
    assert directory_store.role_lookups == 1


@pytest.mark.asyncio
async def test_resolve_unknown_user_is_empty(directory_store):
    """Test an unknown user resolves to no roles rather than an error."""
    resolver = RoleResolver(directory_store)

    assert await resolver.resolve("nobody") == set()


@pytest.mark.asyncio
async def test_resolve_deduplicates(mock_directory_store):
    """Test duplicate ids from the store collapse into a set."""
    mock_directory_store.get_role_ids_for_user.return_value = ["r1", "r2", "r1"]
    resolver = RoleResolver(mock_directory_store)

    assert await resolver.resolve("u1") == {"r1", "r2"}


@pytest.mark.asyncio
async def test_resolve_propagates_store_unavailable(directory_store):
    """Test store outages surface as errors."""
    directory_store.fail_role_lookup = True
    resolver = RoleResolver(directory_store)

    with pytest.raises(StoreUnavailableError) as exc_info:
        await resolver.resolve("u1")

    assert exc_info.value.operation == "get_role_ids_for_user"


@pytest.mark.asyncio
async def test_resolve_wraps_unexpected_store_errors(mock_directory_store):
    """Test arbitrary store exceptions are reported as StoreUnavailableError."""
    mock_directory_store.get_role_ids_for_user = AsyncMock(side_effect=ConnectionResetError("reset by peer"))
    resolver = RoleResolver(mock_directory_store)

    with pytest.raises(StoreUnavailableError) as exc_info:
        await resolver.resolve("u1")

    assert "reset by peer" in exc_info.value.message
    assert isinstance(exc_info.value.__cause__, ConnectionResetError)

"""
Tests for permission matcher.
"""

import pytest

from trusty.features.access.entities import Permission, Role, RoleId
from trusty.features.access.matching import PermissionMatcher, create_permission_matcher


@pytest.fixture
def matcher():
    """Create permission matcher."""
    return create_permission_matcher()


def make_role(role_id, namespace="billing", permissions=()):
    return Role(id=RoleId(role_id), namespace=namespace, permissions=list(permissions))


class TestActionMatching:
    """Test action comparison."""

    def test_exact_action(self, matcher):
        assert matcher.action_matches("read", "read")
        assert not matcher.action_matches("read", "write")

    def test_wildcard_action(self, matcher):
        assert matcher.action_matches("*", "read")
        assert matcher.action_matches("*", "delete")

    def test_action_is_case_sensitive(self, matcher):
        assert not matcher.action_matches("read", "READ")
        assert not matcher.action_matches("Read", "read")


class TestPermissionMatching:
    """Test single permission evaluation."""

    def test_action_and_resource_must_both_match(self, matcher):
        permission = Permission(action="read", resource="invoices/*")

        assert matcher.permission_matches(permission, "read", "invoices/123")
        assert not matcher.permission_matches(permission, "write", "invoices/123")
        assert not matcher.permission_matches(permission, "read", "payments/123")

    @pytest.mark.parametrize("action", ["read", "write", "delete", "approve"])
    def test_wildcard_action_grants_any_action(self, matcher, action):
        permission = Permission(action="*", resource="invoices/**")

        assert matcher.permission_matches(permission, action, "invoices/123/lines")

    def test_malformed_pattern_never_matches(self, matcher):
        permission = Permission(action="*", resource="**/invoices")

        assert not matcher.permission_matches(permission, "read", "a/invoices")

    def test_empty_action_never_matches(self, matcher):
        permission = Permission(action="", resource="**")

        assert not matcher.permission_matches(permission, "", "anything")


class TestRoleMatching:
    """Test role evaluation and the match operation."""

    def test_role_in_other_namespace_is_discarded(self, matcher):
        role = make_role("r1", namespace="billing", permissions=[Permission("read", "invoices/*")])

        assert matcher.role_matches(role, "billing", "read", "invoices/1")
        assert not matcher.role_matches(role, "support", "read", "invoices/1")

    def test_role_without_permissions_grants_nothing(self, matcher):
        role = make_role("r1", permissions=[])

        assert not matcher.role_matches(role, "billing", "read", "invoices/1")

    def test_permissions_within_role_are_ored(self, matcher):
        role = make_role("r1", permissions=[
            Permission("write", "payments/*"),
            Permission("read", "invoices/*"),
        ])

        assert matcher.role_matches(role, "billing", "read", "invoices/1")
        assert matcher.role_matches(role, "billing", "write", "payments/7")
        assert not matcher.role_matches(role, "billing", "write", "invoices/1")

    def test_malformed_permission_does_not_hide_valid_ones(self, matcher):
        role = make_role("r1", permissions=[
            Permission("read", "a/**/b"),
            Permission("read", "invoices/*"),
        ])

        assert matcher.role_matches(role, "billing", "read", "invoices/1")

    def test_match_returns_subset_of_granting_roles(self, matcher):
        roles = [
            make_role("reader", permissions=[Permission("read", "invoices/*")]),
            make_role("admin", permissions=[Permission("*", "**")]),
            make_role("payments", permissions=[Permission("read", "payments/*")]),
            make_role("support-admin", namespace="support", permissions=[Permission("*", "**")]),
            make_role("empty"),
        ]

        matched = matcher.match(roles, "billing", "read", "invoices/9")

        assert matched == {"reader", "admin"}

    def test_match_with_no_roles(self, matcher):
        assert matcher.match([], "billing", "read", "invoices/9") == set()

    def test_matcher_is_reusable_across_calls(self):
        matcher = PermissionMatcher()
        roles = [make_role("r1", permissions=[Permission("read", "orders/**")])]

        first = matcher.match(roles, "billing", "read", "orders/1/items")
        second = matcher.match(roles, "billing", "read", "orders/1/items")

        assert first == second == {"r1"}

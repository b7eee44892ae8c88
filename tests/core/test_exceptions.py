"""
Tests for exception hierarchy and HTTP mapping.
"""

import pytest

from trusty.core.exceptions import (
    ConfigurationError,
    DirectoryStoreError,
    InvalidPatternError,
    InvalidRequestError,
    StoreUnavailableError,
    TrustyError,
    ValidationError,
    create_error_response,
    get_http_status_code,
)


@pytest.mark.parametrize("exc, status", [
    (InvalidRequestError(fields=["action"]), 400),
    (ValidationError("bad"), 400),
    (StoreUnavailableError(), 503),
    (DirectoryStoreError("broken"), 500),
    (ConfigurationError("bad schema"), 500),
    (InvalidPatternError("a/**/b", "misplaced"), 500),
    (TrustyError("boom"), 500),
    (RuntimeError("unmapped"), 500),
])
def test_http_status_mapping(exc, status):
    assert get_http_status_code(exc) == status


def test_subclass_inherits_status_of_mapped_ancestor():
    class ReplicaLagError(StoreUnavailableError):
        pass

    assert get_http_status_code(ReplicaLagError()) == 503


def test_store_unavailable_is_not_a_validation_error():
    exc = StoreUnavailableError("down", operation="get_role_ids_for_user")

    assert isinstance(exc, DirectoryStoreError)
    assert not isinstance(exc, ValidationError)
    assert exc.details == {"operation": "get_role_ids_for_user"}


def test_create_error_response():
    exc = InvalidRequestError("Missing required field(s): namespace", fields=["namespace"])

    assert create_error_response(exc) == {
        "error": {
            "code": "INVALID_REQUEST",
            "message": "Missing required field(s): namespace",
            "details": {"fields": ["namespace"]},
            "type": "InvalidRequestError",
        }
    }


def test_default_error_code_is_class_name():
    assert TrustyError("boom").error_code == "TrustyError"

"""Tests for mapping domain exceptions to HTTP status codes."""

import pytest

from usermgmt.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    OperationFailedError,
    ValidationError,
)
from usermgmt.domain.user import (
    InvalidActionError,
    InvalidRoleError,
    InvalidStatusError,
    UserNotFoundError,
    UserOperationFailedError,
    UserPersistenceError,
    UserValidationError,
)
from usermgmt.presentation.api.exception_handlers import status_for


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (InvalidRoleError(99), 400),
        (InvalidStatusError("Paused"), 400),
        (InvalidActionError(-1), 400),
        (UserValidationError(["Name cannot be empty"]), 400),
        (UserNotFoundError(1), 404),
        (UserOperationFailedError("Failed to create user"), 500),
        (UserPersistenceError("Failed to add user"), 500),
    ],
)
def test_status_by_error_code(exc, expected):
    assert status_for(exc) == expected


class _UnmappedCode(DomainException):
    pass


def test_fallback_uses_exception_type(monkeypatch):
    from usermgmt.presentation.api import exception_handlers

    monkeypatch.setattr(exception_handlers, "ERROR_CODE_TO_STATUS", {})

    assert status_for(EntityNotFoundError("gone")) == 404
    assert status_for(ValidationError("bad")) == 400
    assert status_for(OperationFailedError("odd")) == 500
    assert status_for(_UnmappedCode("?", ErrorCode.INTERNAL_ERROR)) == 400

"""User domain exceptions.

Custom exceptions for the user domain, used for input validation and for
reporting missing or inconsistent user records.
"""

from typing import Any

from usermgmt.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    OperationFailedError,
    ValidationError,
)


class InvalidEmailError(ValueError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidUserNameError(ValueError):
    """Raised when a user name is empty or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidArgumentError(ValidationError):
    """Malformed or missing input, including out-of-range enum values."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_ARGUMENT,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code, details)


class InvalidRoleError(InvalidArgumentError):
    """Value is not one of the defined roles, or a mask has undefined bits."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid role: {value!r}",
            code=ErrorCode.INVALID_ROLE,
            details={"value": repr(value)},
        )


class InvalidStatusError(InvalidArgumentError):
    """Value is not one of the defined statuses."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid status: {value!r}",
            code=ErrorCode.INVALID_STATUS,
            details={"value": repr(value)},
        )


class InvalidActionError(InvalidArgumentError):
    """Value is not one of the defined actions."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid action: {value!r}",
            code=ErrorCode.INVALID_ACTION,
            details={"value": repr(value)},
        )


class UserValidationError(ValidationError):
    """One or more field-level rule violations.

    All violations are collected so they can be reported at once.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(
            "Validation failed for one or more fields.",
            code=ErrorCode.VALIDATION_FAILED,
            details={"errors": self.errors},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(
            f"User with ID {user_id} not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class UserOperationFailedError(OperationFailedError):
    """The store returned an inconsistent result for a user operation."""


class UserPersistenceError(UserOperationFailedError):
    """The store failed while reading or writing user records."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, code=ErrorCode.PERSISTENCE_FAILED, details=details)

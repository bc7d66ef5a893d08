"""Shared domain components.

This module exports the exception hierarchy and time helpers used across
the domain and application layers.
"""

from usermgmt.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    OperationFailedError,
    ValidationError,
)
from usermgmt.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "EntityNotFoundError",
    "OperationFailedError",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]

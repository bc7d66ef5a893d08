"""Translate domain exceptions into JSON error responses.

Every error body has the same shape::

    {"detail": "...", "code": "USER_NOT_FOUND"}

Field validation failures add ``"errors": [...]`` with one message per
violated rule.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from usermgmt.domain.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    OperationFailedError,
    ValidationError,
)
from usermgmt.domain.user import UserValidationError

logger = logging.getLogger(__name__)

_BAD_REQUEST = status.HTTP_400_BAD_REQUEST
_NOT_FOUND = status.HTTP_404_NOT_FOUND
_SERVER_ERROR = status.HTTP_500_INTERNAL_SERVER_ERROR

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_ARGUMENT: _BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: _BAD_REQUEST,
    ErrorCode.INVALID_ROLE: _BAD_REQUEST,
    ErrorCode.INVALID_STATUS: _BAD_REQUEST,
    ErrorCode.INVALID_ACTION: _BAD_REQUEST,
    ErrorCode.ENTITY_NOT_FOUND: _NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: _NOT_FOUND,
    ErrorCode.OPERATION_FAILED: _SERVER_ERROR,
    ErrorCode.PERSISTENCE_FAILED: _SERVER_ERROR,
    ErrorCode.INTERNAL_ERROR: _SERVER_ERROR,
}

# Used when a code has no entry above; first matching base class wins
_FALLBACK_STATUS: tuple[tuple[type[DomainException], int], ...] = (
    (EntityNotFoundError, _NOT_FOUND),
    (ValidationError, _BAD_REQUEST),
    (OperationFailedError, _SERVER_ERROR),
)


def status_for(exc: DomainException) -> int:
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]
    for exc_type, status_code in _FALLBACK_STATUS:
        if isinstance(exc, exc_type):
            return status_code
    return _BAD_REQUEST


def _error_body(
    status_code: int,
    message: str,
    code: str,
    errors: list[str] | None = None,
) -> JSONResponse:
    content: dict = {"detail": message, "code": code}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the domain and catch-all handlers on ``app``."""

    @app.exception_handler(DomainException)
    async def handle_domain_exception(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        status_code = status_for(exc)
        log = logger.error if status_code >= _SERVER_ERROR else logger.warning
        log(
            "%s %s failed: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        errors = exc.errors if isinstance(exc, UserValidationError) else None
        return _error_body(status_code, exc.message, exc.code.value, errors)

    @app.exception_handler(Exception)
    async def handle_unexpected_exception(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _error_body(
            _SERVER_ERROR,
            "An internal error occurred",
            ErrorCode.INTERNAL_ERROR.value,
        )

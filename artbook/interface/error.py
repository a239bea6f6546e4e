"""Interface layer errors and their HTTP translation."""

import logfire
from fastapi import HTTPException, status

from artbook.domain.error import (
    ConflictError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from artbook.domain.service import JWTService


class InterfaceError(Exception):
    """Base interface error."""

    pass


class UnauthorizedError(InterfaceError):
    """No valid session on a call that needs one."""

    pass


def require_user(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    """Return the session's user ID.

    Raises:
        UnauthorizedError: If the token is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise UnauthorizedError(f"Authentication required to {action}")
    return user_id


def optional_user(jwt_service: JWTService, auth_token: str | None) -> str | None:
    """Return the session's user ID, or None for anonymous readers."""
    return jwt_service.get_user_id_from_token(auth_token)


def to_http_exception(error: DomainError | InterfaceError) -> HTTPException:
    """Map a known error to its HTTP status, keeping its message."""
    if isinstance(error, UnauthorizedError):
        code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, NotAuthorizedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, ConflictError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST

    logfire.warn(
        "Request rejected",
        status_code=code,
        error_type=type(error).__name__,
        error=str(error),
    )
    return HTTPException(status_code=code, detail=_public_message(error))


def _public_message(error: DomainError | InterfaceError) -> str:
    if isinstance(error, NotFoundError):
        return f"{error.resource} not found"
    if isinstance(error, NotAuthorizedError):
        return f"Not authorized to {error.action} this {error.resource}"
    return str(error)


def internal_error(message: str, error: Exception, **context) -> HTTPException:
    """Log an unexpected failure with full context and hide it from the caller."""
    logfire.error(
        message,
        error=str(error),
        error_type=type(error).__name__,
        _exc_info=error,
        **context,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message,
    )

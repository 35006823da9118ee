"""Mapping of domain and validation errors to HTTP responses."""

import logfire
from fastapi import HTTPException, status

from quorum.domain.error import (
    AlreadyExistsError,
    BusinessRuleViolationError,
    ConflictError,
    DomainError,
    InvalidCredentialsError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (BusinessRuleViolationError, status.HTTP_400_BAD_REQUEST),
    (NotAuthorizedError, status.HTTP_403_FORBIDDEN),
    (InvalidCredentialsError, status.HTTP_401_UNAUTHORIZED),
    (AlreadyExistsError, status.HTTP_409_CONFLICT),
    (ConflictError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: Exception) -> HTTPException:
    """Translate an error raised by a use case into an HTTPException.

    Domain errors map by type. Any other ``ValueError`` (malformed IDs,
    value objects rejecting input) is a bad request.

    Args:
        error: Error raised while serving the request

    Returns:
        HTTPException to raise from the route
    """
    code = status.HTTP_400_BAD_REQUEST
    for error_type, error_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            code = error_code
            break

    logfire.warn(
        "Request failed", error=str(error), error_type=type(error).__name__, status=code
    )
    return HTTPException(status_code=code, detail=str(error))

"""Application exception types and their public error mapping."""

from __future__ import annotations

from typing import Any

from app.adapters.auth.base import AuthVerificationError
from app.schemas.error import ErrorResponse


class ApiError(Exception):
    """Structured API error that maps directly to contract error payloads."""

    def __init__(self, status_code: int, code: str, message: str, details: dict | None = None) -> None:
        self.status_code = status_code
        self.payload = ErrorResponse(code=code, message=message, details=details)
        super().__init__(message)


class ChirpyError(Exception):
    """Base class for internal, non-authentication failure kinds."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class BadRequestError(ChirpyError):
    """The request payload could not be decoded."""


class ValidationFailedError(ChirpyError):
    """The payload decoded but violates a content constraint.

    ``code`` and ``status_code`` name the specific constraint in the response.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "VALIDATION_FAILED",
        status_code: int = 422,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=details)
        self.code = code
        self.status_code = status_code


class NotFoundError(ChirpyError):
    pass


class ConflictError(ChirpyError):
    pass


class ForbiddenError(ChirpyError):
    pass


class StorageError(ChirpyError):
    """Persistence failed; ``message`` is safe to return, the cause is not."""


_UNAUTHORIZED = ("UNAUTHORIZED", "Unauthorized")
_NOT_FOUND = ("RESOURCE_NOT_FOUND", "Resource not found")


def to_api_error(exc: Exception) -> ApiError:
    """Map an internal failure kind onto the response the caller is allowed to see.

    Authentication failures of every kind share one fixed body so that callers
    cannot tell a bad token from a bad password or an unknown account.
    """
    if isinstance(exc, ApiError):
        return exc
    if isinstance(exc, AuthVerificationError):
        code, message = _UNAUTHORIZED
        return ApiError(status_code=401, code=code, message=message)
    if isinstance(exc, BadRequestError):
        return ApiError(status_code=400, code="BAD_REQUEST", message=exc.message, details=exc.details)
    if isinstance(exc, ValidationFailedError):
        return ApiError(status_code=exc.status_code, code=exc.code, message=exc.message, details=exc.details)
    if isinstance(exc, NotFoundError):
        code, message = _NOT_FOUND
        return ApiError(status_code=404, code=code, message=message)
    if isinstance(exc, ConflictError):
        return ApiError(status_code=409, code="CONFLICT", message=exc.message)
    if isinstance(exc, ForbiddenError):
        return ApiError(status_code=403, code="FORBIDDEN", message=exc.message)
    if isinstance(exc, StorageError):
        return ApiError(status_code=500, code="STORAGE_ERROR", message=exc.message)
    return ApiError(status_code=500, code="INTERNAL_ERROR", message="Internal server error")


__all__ = [
    "ApiError",
    "BadRequestError",
    "ChirpyError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "StorageError",
    "ValidationFailedError",
    "to_api_error",
]

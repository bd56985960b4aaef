"""
Domain errors raised by the resource controllers.

Each error carries the HTTP status code it maps to; the application's
exception handler renders them into the standard error envelope.
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi import status


class ResourceError(Exception):
    """Base class for errors surfaced by the resource lifecycle layer."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error_type: str = "resource_error"
    default_message: str = "Request could not be processed"

    def __init__(self, message: Optional[str] = None, details: Any = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class BadRequest(ResourceError):
    """Malformed request, e.g. a non-numeric id."""

    error_type = "bad_request"
    default_message = "id is required"


class NotFound(ResourceError):
    """No row with this id is owned by the caller's account."""

    status_code = status.HTTP_404_NOT_FOUND
    error_type = "not_found"
    default_message = "Resource not found"


class Unprocessable(ResourceError):
    """Payload rejected by the validation gate."""

    status_code = 422
    error_type = "unprocessable"
    default_message = "Payload does not match the resource schema"


class ConstraintViolation(ResourceError):
    """A uniqueness constraint would be broken by the write."""

    error_type = "constraint_violation"
    default_message = "Uniqueness constraint violated"


class StoreFailure(ResourceError):
    """Unexpected failure in the backing store."""

    error_type = "store_failure"
    default_message = "Request could not be processed"

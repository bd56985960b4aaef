"""
Exception handlers rendering every failure into the ErrorResponse envelope.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mailshrimp_api.core.errors import ResourceError
from mailshrimp_api.schemas.common import ErrorInfo, ErrorResponse

logger = logging.getLogger(__name__)


def error_response(
    request: Request,
    status_code: int,
    error_type: str,
    message: str,
    details: Optional[Any] = None,
) -> JSONResponse:
    state = request.state
    envelope = ErrorResponse(
        status=status_code,
        error=ErrorInfo(type=error_type, message=message, details=details),
        correlation_id=getattr(state, "correlation_id", None),
        account_id=getattr(state, "account_id", None),
        path=request.url.path,
        method=request.method,
        timestamp=datetime.now(tz=timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=envelope.model_dump(mode="json"))


async def on_resource_error(request: Request, exc: ResourceError) -> JSONResponse:
    return error_response(request, exc.status_code, exc.error_type, exc.message, exc.details)


async def on_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, str):
        return error_response(request, exc.status_code, "http_error", exc.detail)
    return error_response(request, exc.status_code, "http_error", "HTTP Error", exc.detail)


async def on_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    issues = [
        {"loc": list(issue.get("loc", ())), "msg": issue.get("msg"), "type": issue.get("type")}
        for issue in exc.errors()
    ]
    return error_response(request, 422, "validation_error", "Request validation failed", issues)


async def on_unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(request, 500, "internal_error", "An unexpected error occurred")


# PUBLIC_INTERFACE
def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing handlers on app."""
    app.add_exception_handler(ResourceError, on_resource_error)
    app.add_exception_handler(StarletteHTTPException, on_http_error)
    app.add_exception_handler(RequestValidationError, on_request_validation_error)
    app.add_exception_handler(Exception, on_unhandled_error)

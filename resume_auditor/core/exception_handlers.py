"""Global exception handlers for consistent error responses.

This module provides FastAPI exception handlers that intercept all errors
(domain, HTTP-level and unexpected) and return the flat ``{"error": ...}``
JSON body the browser client expects.

Design:
- ValidationAppError → 400 ``{"error": message}``
- ConfigurationAppError → 500 ``{"error": message}``
- LLMAppError → 500 ``{"error": code, "message": message}``
- Starlette HTTPException (405, 404) → ``{"error": detail}`` with its headers
- Malformed request bodies → 400
- Unexpected Exception → generic 500 (safety net)
"""

import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from resume_auditor.core.errors import (
    AppError,
    ConfigurationAppError,
    LLMAppError,
    ValidationAppError,
)
from resume_auditor.core.logging import get_request_id

logger = logging.getLogger(__name__)


def _status_for(exc: AppError) -> int:
    if isinstance(exc, ValidationAppError):
        return 400
    if isinstance(exc, (ConfigurationAppError, LLMAppError)):
        return 500
    return 400


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle domain application errors.

    Upstream failures expose their stable code as ``error`` and the
    diagnostic text as ``message``; every other domain error carries its
    human-readable message as ``error``.

    Args:
        request: FastAPI request object.
        exc: AppError instance (or subclass).

    Returns:
        JSONResponse with appropriate status code.
    """
    status_code = _status_for(exc)

    logger.warning(
        "app_error_handled",
        extra={
            "error_code": exc.code,
            "error_message": exc.message,
            "status_code": status_code,
            "error_details": exc.details or {},
            "request_id": get_request_id(),
        },
    )

    if isinstance(exc, LLMAppError):
        content = {"error": exc.code, "message": exc.message}
    else:
        content = {"error": exc.message}

    return JSONResponse(status_code=status_code, content=content)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Render routing-level HTTP errors (405, 404) in the flat error format.

    Headers such as ``Allow`` set by the router are preserved.
    """
    logger.info(
        "http_error_handled",
        extra={
            "status_code": exc.status_code,
            "request_path": request.url.path,
            "request_method": request.method,
        },
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject bodies FastAPI could not decode (e.g. invalid JSON) with 400."""
    logger.warning(
        "request_body_invalid",
        extra={
            "error_count": len(exc.errors()),
            "request_path": request.url.path,
        },
    )
    return JSONResponse(
        status_code=400,
        content={"error": "Request body must be valid JSON"},
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Fallback handler for unexpected errors (safety net).

    Logs detailed information for debugging while returning a generic
    message. No stack traces are sent to the client.
    """
    logger.error(
        "unhandled_exception",
        extra={
            "error_type": type(exc).__name__,
            "error_msg": str(exc),
            "request_path": request.url.path,
            "request_method": request.method,
            "request_id": get_request_id(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "INTERNAL_SERVER_ERROR",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


def setup_exception_handlers(app) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance.

    Example:
        >>> from fastapi import FastAPI
        >>> app = FastAPI()
        >>> setup_exception_handlers(app)
    """
    app.exception_handler(AppError)(app_error_handler)
    app.exception_handler(StarletteHTTPException)(http_exception_handler)
    app.exception_handler(RequestValidationError)(request_validation_handler)
    app.exception_handler(Exception)(general_exception_handler)

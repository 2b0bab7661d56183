from __future__ import annotations

"""
Global exception handlers for the FastAPI application.

Domain errors are translated to HTTP responses through one table,
``HTTP_STATUS_BY_KIND``, keyed by :class:`ErrorKind`. Internal kinds answer
with a generic message; their detail only goes to the server log.
"""

from typing import Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette import status
from structlog import get_logger

from inkwell.core.exceptions import INTERNAL_ERROR_MESSAGE, ErrorKind, InkwellError

__all__ = [
    "HTTP_STATUS_BY_KIND",
    "http_status_for",
    "inkwell_error_handler",
    "request_validation_error_handler",
    "rate_limit_exception_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)

HTTP_STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.POST_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.USER_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNAUTHENTICATED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.DATABASE: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.PASSWORD_HASH: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorKind.JWT: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def http_status_for(kind: ErrorKind) -> int:
    return HTTP_STATUS_BY_KIND[kind]


async def inkwell_error_handler(request: Request, exc: InkwellError) -> JSONResponse:
    """Handles every `InkwellError` through `HTTP_STATUS_BY_KIND`.

    Args:
        request: The incoming `Request` object.
        exc: The domain error.

    Returns:
        A `JSONResponse` with ``{"detail": message}``. 401 responses carry a
        ``WWW-Authenticate: Bearer`` challenge.
    """
    status_code = http_status_for(exc.kind)
    log_context = dict(
        error=exc.code,
        path=request.url.path,
        method=request.method,
        status_code=status_code,
    )
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Internal error", detail=exc.message, **log_context)
    else:
        logger.info("Request rejected", **log_context)

    headers = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.public_message},
        headers=headers,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handles malformed bodies and query parameters with a `400 Bad Request`."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.info("Request validation failed", path=request.url.path, detail=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message},
    )


async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Handles slowapi's `RateLimitExceeded`, returning a `429 Too Many Requests`."""
    logger.warning(
        "Rate limit exceeded",
        client_ip=request.client.host if request.client else None,
        path=request.url.path,
        limit=str(exc.detail),
    )
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={"detail": "Too many requests"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registers all custom exception handlers with the FastAPI application."""
    app.add_exception_handler(InkwellError, inkwell_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

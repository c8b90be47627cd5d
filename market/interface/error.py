"""Interface layer error handling.

Every error response has the shape ``{"error": <message>, "code": <reason>}``
so clients can branch on ``code`` without parsing messages.
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from market.domain.error import (
    DomainError,
    NotFoundError,
    RateLimitExceededError,
    StoreUnavailableError,
)

HTTP_ERROR_CODES = {
    status.HTTP_400_BAD_REQUEST: "invalid_input",
    status.HTTP_401_UNAUTHORIZED: "unauthorized",
    status.HTTP_403_FORBIDDEN: "forbidden",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def error_body(message: str, code: str, **extra: Any) -> dict[str, Any]:
    """Build an error response body."""
    return {"error": message, "code": code, **extra}


def status_for(error: DomainError) -> int:
    """HTTP status for a domain error."""
    if isinstance(error, RateLimitExceededError):
        return status.HTTP_429_TOO_MANY_REQUESTS
    if isinstance(error, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, StoreUnavailableError):
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_400_BAD_REQUEST


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)

    extra: dict[str, Any] = {}
    headers: dict[str, str] = {}
    if isinstance(exc, RateLimitExceededError):
        extra["retry_after"] = exc.retry_after
        headers["Retry-After"] = str(exc.retry_after)

    if status_code >= 500:
        logfire.error(
            "Request failed", path=request.url.path, code=exc.code, error=exc.message
        )
        message = "Service temporarily unavailable"
    else:
        logfire.info(
            "Request rejected", path=request.url.path, code=exc.code, error=exc.message
        )
        message = exc.message

    return JSONResponse(
        status_code=status_code,
        content=error_body(message, exc.code, **extra),
        headers=headers or None,
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    else:
        message = "Invalid request"

    logfire.info("Request validation failed", path=request.url.path, error=message)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message, "invalid_input"),
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(
            str(exc.detail), HTTP_ERROR_CODES.get(exc.status_code, "http_error")
        ),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    # Store errors can carry SQL and connection details; never echo them
    logfire.exception(
        "Unhandled error",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", "internal_error"),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and framework errors to JSON error responses.

    Args:
        app: FastAPI application
    """
    app.add_exception_handler(DomainError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)

"""Global error hierarchy and FastAPI exception handlers.

Application errors extend ApiError and know which Outcome they stand for.
The handlers registered here are the catch-all boundary: every exception
that escapes a route (ApiError, FastAPI's RequestValidationError, Starlette
HTTPException, or anything else) is classified into an Outcome once and
rendered through the mapper, so clients always get a well-formed envelope.
"""

from __future__ import annotations

import logging
from collections import defaultdict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_envelope.models.outcomes import (
    DEFAULT_FORBIDDEN_MESSAGE,
    DEFAULT_NOT_FOUND_MESSAGE,
    DEFAULT_RATE_LIMITED_MESSAGE,
    DEFAULT_UNAUTHORIZED_MESSAGE,
    DEFAULT_VALIDATION_MESSAGE,
    Outcome,
    build_forbidden,
    build_internal_fault,
    build_not_found,
    build_rate_limited,
    build_unauthorized,
    build_validation_failure,
)
from api_envelope.transport import render

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class ApiError(Exception):
    """Base error for all application errors that map to a client-facing outcome."""

    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.__class__.message
        super().__init__(self.message)

    def to_outcome(self) -> Outcome:
        return build_internal_fault(self.message)


class NotFoundError(ApiError):
    """Requested resource does not exist."""

    message = DEFAULT_NOT_FOUND_MESSAGE

    def to_outcome(self) -> Outcome:
        return build_not_found(self.message)


class RequestValidationFailedError(ApiError):
    """Business-rule validation failure with per-field messages."""

    message = DEFAULT_VALIDATION_MESSAGE

    def __init__(self, errors: dict[str, list[str]], message: str | None = None) -> None:
        super().__init__(message)
        self.errors = errors

    def to_outcome(self) -> Outcome:
        return build_validation_failure(self.errors, self.message)


class UnauthorizedError(ApiError):
    """Missing or invalid credentials."""

    message = DEFAULT_UNAUTHORIZED_MESSAGE

    def to_outcome(self) -> Outcome:
        return build_unauthorized(self.message)


class ForbiddenError(ApiError):
    """Authenticated, but not allowed to perform the operation."""

    message = DEFAULT_FORBIDDEN_MESSAGE

    def to_outcome(self) -> Outcome:
        return build_forbidden(self.message)


class RateLimitedError(ApiError):
    """Caller exceeded its request budget."""

    message = DEFAULT_RATE_LIMITED_MESSAGE

    def to_outcome(self) -> Outcome:
        return build_rate_limited(self.message)


# ---------------------------------------------------------------------------
# Classification helpers
# ---------------------------------------------------------------------------


def _field_path(loc: tuple) -> str:
    """``("body", "user", "email")`` -> ``"user.email"``."""
    parts = [str(part) for part in loc if part not in ("body", "query", "path", "header")]
    return ".".join(parts) or "request"


def outcome_from_request_validation(exc: RequestValidationError) -> Outcome:
    """Group pydantic errors by field path into a ValidationFailed outcome."""
    grouped: dict[str, list[str]] = defaultdict(list)
    for err in exc.errors():
        grouped[_field_path(tuple(err.get("loc", ())))].append(err.get("msg", "Invalid value"))
    if not grouped:
        grouped["request"].append("Invalid request")
    return build_validation_failure(grouped)


def outcome_from_http_exception(exc: StarletteHTTPException) -> Outcome:
    """Fold framework HTTP errors into the fixed status table."""
    detail = exc.detail if isinstance(exc.detail, str) else None

    if exc.status_code in (404, 405):
        return build_not_found(detail)
    if exc.status_code == 401:
        return build_unauthorized(detail)
    if exc.status_code == 403:
        return build_forbidden(detail)
    if exc.status_code == 429:
        return build_rate_limited(detail)
    if exc.status_code in (400, 422):
        return build_validation_failure({"request": [detail or "Invalid request"]})
    return build_internal_fault()


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Handle ApiError subclasses."""
    outcome = exc.to_outcome()
    logger.warning(
        "%s: %s",
        exc.__class__.__name__,
        exc.message,
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "path": request.url.path,
            "outcome": type(outcome).__name__,
        },
    )
    return render(outcome)


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError (422)."""
    outcome = outcome_from_request_validation(exc)
    logger.warning(
        "Request validation failed on %d field(s)",
        len(outcome.errors),
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "path": request.url.path,
            "outcome": type(outcome).__name__,
        },
    )
    return render(outcome)


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle Starlette HTTPException (unknown routes, wrong methods, explicit raises)."""
    return render(outcome_from_http_exception(exc))


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log traceback, return generic 500."""
    logger.error(
        "Unhandled exception: %s",
        exc,
        exc_info=exc,
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "path": request.url.path,
        },
    )
    return render(build_internal_fault())


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(ApiError, _api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]

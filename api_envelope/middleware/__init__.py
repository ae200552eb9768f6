"""Middleware package: error hierarchy, auth, rate limiting and request ID."""

from api_envelope.middleware.auth import ServiceKeyAuthMiddleware
from api_envelope.middleware.error_handler import (
    ApiError,
    ForbiddenError,
    NotFoundError,
    RateLimitedError,
    RequestValidationFailedError,
    UnauthorizedError,
    register_error_handlers,
)
from api_envelope.middleware.rate_limit import RateLimitMiddleware
from api_envelope.middleware.request_id import RequestIdMiddleware

__all__ = [
    "ApiError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitMiddleware",
    "RateLimitedError",
    "RequestIdMiddleware",
    "RequestValidationFailedError",
    "ServiceKeyAuthMiddleware",
    "UnauthorizedError",
    "register_error_handlers",
]

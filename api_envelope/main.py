"""FastAPI application factory.

Run with ``uvicorn api_envelope.main:create_app --factory``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from api_envelope.config.settings import EnvelopeSettings
from api_envelope.logging_config import configure_logging
from api_envelope.middleware.auth import ServiceKeyAuthMiddleware
from api_envelope.middleware.error_handler import register_error_handlers
from api_envelope.middleware.rate_limit import RateLimitMiddleware
from api_envelope.middleware.request_id import RequestIdMiddleware
from api_envelope.resilience.rate_limiter import ClientRateLimiter
from api_envelope.routers.health import create_health_router
from api_envelope.routers.users import create_users_router
from api_envelope.services.user_repository import (
    InMemoryUserRepository,
    UserRepository,
    seed_demo_users,
)
from api_envelope.services.user_service import UserService

logger = logging.getLogger(__name__)


def create_app(
    settings: EnvelopeSettings | None = None,
    *,
    repository: UserRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Loads ``EnvelopeSettings`` eagerly when none are passed, so a missing
    ``ENVELOPE_SERVICE_KEY`` fails at startup instead of on first request.
    """
    settings = settings or EnvelopeSettings()  # type: ignore[call-arg]

    if repository is None:
        repository = InMemoryUserRepository()
        if settings.seed_users:
            seed_demo_users(repository)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info("Starting API service on port %d", settings.port)
        yield
        logger.info("API service shut down")

    app = FastAPI(
        title="API Envelope Service",
        version="1.0.0",
        lifespan=lifespan,
    )

    register_error_handlers(app)

    # Starlette applies middleware in reverse order of add_middleware calls:
    # request_id -> rate_limit -> auth -> routes
    app.add_middleware(ServiceKeyAuthMiddleware, service_key=settings.service_key)
    app.add_middleware(
        RateLimitMiddleware,
        limiter=ClientRateLimiter(
            tokens=settings.rate_limit_tokens,
            interval_seconds=settings.rate_limit_interval_seconds,
        ),
    )
    app.add_middleware(RequestIdMiddleware)

    app.include_router(create_health_router())
    app.include_router(
        create_users_router(
            user_service=UserService(repository),
            default_page_limit=settings.default_page_limit,
        )
    )

    return app

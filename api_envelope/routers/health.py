"""Health endpoint. Not authenticated and not rate limited."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from api_envelope.models.outcomes import build_success
from api_envelope.transport import render


def create_health_router(*, service_name: str = "api-envelope") -> APIRouter:
    """Factory that creates the health router."""

    health_router = APIRouter(tags=["health"])

    @health_router.get("/health")
    async def health() -> JSONResponse:
        return render(build_success({"status": "healthy", "service": service_name}))

    return health_router

"""Rate-limit middleware.

Consults a ClientRateLimiter keyed by the caller's address and answers with
the ``RateLimited`` envelope (429) once the caller's bucket is empty.
``/health`` is never limited.
"""

from __future__ import annotations

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from api_envelope.models.outcomes import build_rate_limited
from api_envelope.resilience.rate_limiter import ClientRateLimiter
from api_envelope.transport import render

_EXEMPT_PATHS: set[str] = {"/health"}


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, limiter: ClientRateLimiter) -> None:  # noqa: ANN001
        super().__init__(app)
        self._limiter = limiter

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _EXEMPT_PATHS:
            return await call_next(request)

        client = request.client.host if request.client else "unknown"
        if not await self._limiter.try_acquire(client):
            return render(build_rate_limited())

        return await call_next(request)

"""X-Service-Key authentication middleware.

Validates the X-Service-Key header against the configured service key from
EnvelopeSettings. ``/health`` is excluded from authentication.

Uses ``hmac.compare_digest`` for constant-time comparison of the key.
"""

from __future__ import annotations

import hmac
import logging

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from api_envelope.models.outcomes import build_unauthorized
from api_envelope.transport import render

logger = logging.getLogger(__name__)

# Paths that do NOT require authentication.
_PUBLIC_PATHS: set[str] = {"/health"}


class ServiceKeyAuthMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that enforces X-Service-Key authentication.

    Missing and wrong keys both answer with the ``Unauthorized`` envelope;
    the reason is only recorded in the log.
    """

    def __init__(self, app, service_key: str) -> None:  # noqa: ANN001
        super().__init__(app)
        self._service_key = service_key

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in _PUBLIC_PATHS:
            return await call_next(request)

        provided_key = request.headers.get("x-service-key")

        if not provided_key or not hmac.compare_digest(
            provided_key.encode(), self._service_key.encode()
        ):
            logger.warning(
                "Rejected request without a valid X-Service-Key",
                extra={
                    "request_id": getattr(request.state, "request_id", None),
                    "reason": "missing_service_key" if not provided_key else "invalid_service_key",
                    "client": request.client.host if request.client else "unknown",
                    "path": request.url.path,
                },
            )
            return render(build_unauthorized("Invalid or missing service key"))

        return await call_next(request)

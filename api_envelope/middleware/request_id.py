"""Request ID and access-log middleware.

Generates (or propagates) a UUID request ID for every incoming request,
stores it in ``request.state.request_id``, adds an ``X-Request-ID``
response header and emits one structured access-log line per request.

This is the outermost user middleware, so an exception nothing inside
handled still reaches it. It is rendered as the generic InternalFault
envelope here, keeping the header and the access line on the 500 path.
"""

from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from api_envelope.models.outcomes import build_internal_fault
from api_envelope.transport import render

logger = logging.getLogger(__name__)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that assigns a unique request ID to each request.

    If the incoming request already carries an ``X-Request-ID`` header the
    provided value is reused; otherwise a new UUID4 is generated.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id
        started = time.perf_counter()

        try:
            response: Response = await call_next(request)
        except Exception as exc:
            logger.error(
                "Unhandled exception: %s",
                exc,
                exc_info=exc,
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                },
            )
            response = render(build_internal_fault())

        response.headers["X-Request-ID"] = request_id

        logger.info(
            "%s %s -> %d",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response

"""Property tests for request ID uniqueness.

Every response carries a unique UUID4 in the X-Request-ID header, whether
the route succeeded or the error boundary produced the body.
"""

from __future__ import annotations

import uuid

from fastapi import FastAPI
from fastapi.testclient import TestClient
from hypothesis import given, settings
from hypothesis import strategies as st

from api_envelope.middleware.error_handler import register_error_handlers
from api_envelope.middleware.request_id import RequestIdMiddleware
from api_envelope.models.outcomes import build_success
from api_envelope.transport import render


def _create_test_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/ping")
    async def ping():
        return render(build_success({"pong": True}))

    app.add_middleware(RequestIdMiddleware)
    return app


_app = _create_test_app()
_client = TestClient(_app, raise_server_exceptions=False)


@settings(max_examples=50, deadline=None)
@given(n=st.integers(min_value=2, max_value=20), path=st.sampled_from(["/ping", "/missing"]))
def test_request_ids_are_unique_uuids(n: int, path: str) -> None:
    collected_ids: list[str] = []

    for _ in range(n):
        resp = _client.get(path)
        rid = resp.headers.get("X-Request-ID")
        assert rid is not None, "X-Request-ID header must be present"

        parsed = uuid.UUID(rid, version=4)
        assert str(parsed) == rid

        collected_ids.append(rid)

    assert len(set(collected_ids)) == len(collected_ids), "Request IDs must be unique"

"""FastAPI side of the convention: turn an Outcome into a JSONResponse.

This is the only place that writes mapper output onto the wire. Status and
body are passed through untouched.
"""

from __future__ import annotations

import logging

from fastapi.responses import JSONResponse

from api_envelope.mapper import map_outcome
from api_envelope.models.outcomes import Outcome

logger = logging.getLogger(__name__)


def render(outcome: Outcome) -> JSONResponse:
    status_code, body = map_outcome(outcome)
    logger.debug(
        "Rendered %s -> %d",
        type(outcome).__name__,
        status_code,
        extra={"outcome": type(outcome).__name__, "status_code": status_code},
    )
    return JSONResponse(status_code=status_code, content=body.to_wire())

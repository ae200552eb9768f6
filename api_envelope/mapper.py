"""Outcome -> (HTTP status, Envelope) mapping.

The whole response convention lives in ``_DECISION_TABLE``. The mapper is a
pure function of its input: no I/O, no shared state, safe to call from any
number of concurrent requests.

Success vs. SuccessEmpty is what picks 200 vs. 201, not the HTTP verb that
produced the outcome. A create that returns the new record is a 200; a
delete with nothing to return is a 201.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from api_envelope.models.outcomes import (
    Forbidden,
    InternalFault,
    NotFound,
    Outcome,
    RateLimited,
    Success,
    SuccessEmpty,
    Unauthorized,
    ValidationFailed,
)
from api_envelope.models.responses import Envelope


class MappedResponse(NamedTuple):
    status_code: int
    body: Envelope[Any]


# variant -> (status, isSuccess)
_DECISION_TABLE: dict[type, tuple[int, bool]] = {
    Success: (200, True),
    SuccessEmpty: (201, True),
    Unauthorized: (401, False),
    Forbidden: (403, False),
    NotFound: (404, False),
    ValidationFailed: (422, False),
    RateLimited: (429, False),
    InternalFault: (500, False),
}

EMITTED_STATUS_CODES: frozenset[int] = frozenset(
    status for status, _ in _DECISION_TABLE.values()
)


class ResponseMapper:
    """Stateless mapper from an application Outcome to status + envelope."""

    def map(self, outcome: Outcome) -> MappedResponse:
        try:
            status_code, is_success = _DECISION_TABLE[type(outcome)]
        except KeyError:
            raise TypeError(
                f"Unsupported outcome type: {type(outcome).__name__}"
            ) from None

        data = outcome.payload if isinstance(outcome, Success) else None

        validation_errors = None
        if isinstance(outcome, ValidationFailed):
            validation_errors = {
                field: list(messages) for field, messages in outcome.errors.items()
            }

        body: Envelope[Any] = Envelope(
            is_success=is_success,
            message=outcome.message,
            data=data,
            validation_errors=validation_errors,
        )
        return MappedResponse(status_code=status_code, body=body)


_default_mapper = ResponseMapper()


def map_outcome(outcome: Outcome) -> MappedResponse:
    """Module-level shortcut for ``ResponseMapper().map``."""
    return _default_mapper.map(outcome)

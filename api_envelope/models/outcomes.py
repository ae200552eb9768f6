"""Outcome variants produced by application logic and consumed by the mapper.

An Outcome describes *what happened* while handling one request. It is built
once (usually through one of the ``build_*`` helpers below), handed to
``ResponseMapper.map`` exactly once, then discarded.

All variants are frozen dataclasses so an outcome cannot be mutated between
construction and mapping.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from api_envelope.models.responses import PaginatedPayload

DEFAULT_SUCCESS_MESSAGE = "Request processed successfully"
DEFAULT_NOT_FOUND_MESSAGE = "Resource not found"
DEFAULT_VALIDATION_MESSAGE = "Validation errors occurred"
DEFAULT_UNAUTHORIZED_MESSAGE = "Unauthorized"
DEFAULT_FORBIDDEN_MESSAGE = "Forbidden"
DEFAULT_RATE_LIMITED_MESSAGE = "Too many requests"
DEFAULT_INTERNAL_FAULT_MESSAGE = "Internal server error"


class InvalidArgumentError(ValueError):
    """Raised when an Outcome is constructed with arguments that break its contract."""


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Success:
    """Operation succeeded and carries a payload (may be ``None``)."""

    payload: Any = None
    message: str = DEFAULT_SUCCESS_MESSAGE


@dataclass(frozen=True)
class SuccessEmpty:
    """Operation succeeded with nothing to return (e.g. a delete)."""

    message: str = DEFAULT_SUCCESS_MESSAGE


@dataclass(frozen=True)
class NotFound:
    message: str = DEFAULT_NOT_FOUND_MESSAGE


@dataclass(frozen=True)
class ValidationFailed:
    """Per-field validation failure.

    ``errors`` maps a field name to the ordered messages for that field. At
    least one field is required and every field needs at least one message;
    violations raise ``InvalidArgumentError`` here, at construction, rather
    than surfacing as a 500 when the response is rendered. Message lists are
    copied to tuples so later changes to the caller's lists do not leak in.
    """

    errors: Mapping[str, Sequence[str]]
    message: str = DEFAULT_VALIDATION_MESSAGE

    def __post_init__(self) -> None:
        if not self.errors:
            raise InvalidArgumentError("Validation failure requires at least one field error")

        frozen: dict[str, tuple[str, ...]] = {}
        for field_name, messages in self.errors.items():
            if isinstance(messages, str):
                raise InvalidArgumentError(
                    f"Errors for field '{field_name}' must be a sequence of messages, not a string"
                )
            if len(messages) == 0:
                raise InvalidArgumentError(f"Field '{field_name}' has no error messages")
            frozen[field_name] = tuple(messages)

        object.__setattr__(self, "errors", frozen)


@dataclass(frozen=True)
class Unauthorized:
    message: str = DEFAULT_UNAUTHORIZED_MESSAGE


@dataclass(frozen=True)
class Forbidden:
    message: str = DEFAULT_FORBIDDEN_MESSAGE


@dataclass(frozen=True)
class RateLimited:
    message: str = DEFAULT_RATE_LIMITED_MESSAGE


@dataclass(frozen=True)
class InternalFault:
    """Catch-all for unexpected faults. Never carries internal details."""

    message: str = DEFAULT_INTERNAL_FAULT_MESSAGE


Outcome = Union[
    Success,
    SuccessEmpty,
    NotFound,
    ValidationFailed,
    Unauthorized,
    Forbidden,
    RateLimited,
    InternalFault,
]


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def build_success(payload: Any = None, message: str | None = None) -> Success:
    return Success(payload=payload, message=message or DEFAULT_SUCCESS_MESSAGE)


def build_success_empty(message: str | None = None) -> SuccessEmpty:
    return SuccessEmpty(message=message or DEFAULT_SUCCESS_MESSAGE)


def build_not_found(message: str | None = None) -> NotFound:
    return NotFound(message=message or DEFAULT_NOT_FOUND_MESSAGE)


def build_unauthorized(message: str | None = None) -> Unauthorized:
    return Unauthorized(message=message or DEFAULT_UNAUTHORIZED_MESSAGE)


def build_forbidden(message: str | None = None) -> Forbidden:
    return Forbidden(message=message or DEFAULT_FORBIDDEN_MESSAGE)


def build_rate_limited(message: str | None = None) -> RateLimited:
    return RateLimited(message=message or DEFAULT_RATE_LIMITED_MESSAGE)


def build_internal_fault(message: str | None = None) -> InternalFault:
    return InternalFault(message=message or DEFAULT_INTERNAL_FAULT_MESSAGE)


def build_validation_failure(
    errors: Mapping[str, Sequence[str]],
    message: str | None = None,
) -> ValidationFailed:
    """Build a ValidationFailed outcome; see ``ValidationFailed`` for the checks."""
    return ValidationFailed(errors=errors, message=message or DEFAULT_VALIDATION_MESSAGE)


def build_paginated(
    items: Sequence[Any],
    total: int,
    page: int,
    limit: int,
    message: str | None = None,
) -> Success:
    """Wrap one page of results in a Success outcome.

    No clamping happens here: a page past the end is expressed by the
    caller passing empty ``items`` with the real ``total``.
    """
    if page < 1:
        raise InvalidArgumentError(f"page must be >= 1, got {page}")
    if limit < 1:
        raise InvalidArgumentError(f"limit must be >= 1, got {limit}")
    if total < 0:
        raise InvalidArgumentError(f"total must be >= 0, got {total}")
    if len(items) > limit:
        raise InvalidArgumentError(
            f"page holds {len(items)} items, more than limit {limit}"
        )
    if total < len(items):
        raise InvalidArgumentError(
            f"total {total} is smaller than the {len(items)} items on this page"
        )

    payload = PaginatedPayload(items=list(items), total=total, page=page, limit=limit)
    return build_success(payload, message)


def paginate(
    all_items: Sequence[Any],
    page: int,
    limit: int,
    message: str | None = None,
) -> Success:
    """Slice ``all_items`` to the 1-indexed ``page`` and wrap it.

    Pages beyond the end yield an empty ``items`` list; ``total`` always
    reflects ``len(all_items)``.
    """
    if page < 1:
        raise InvalidArgumentError(f"page must be >= 1, got {page}")
    if limit < 1:
        raise InvalidArgumentError(f"limit must be >= 1, got {limit}")

    start = (page - 1) * limit
    return build_paginated(
        items=all_items[start:start + limit],
        total=len(all_items),
        page=page,
        limit=limit,
        message=message,
    )

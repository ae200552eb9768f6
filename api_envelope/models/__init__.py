"""Public models: outcome variants, constructors and the wire envelope."""

from api_envelope.models.outcomes import (
    Forbidden,
    InternalFault,
    InvalidArgumentError,
    NotFound,
    Outcome,
    RateLimited,
    Success,
    SuccessEmpty,
    Unauthorized,
    ValidationFailed,
    build_forbidden,
    build_internal_fault,
    build_not_found,
    build_paginated,
    build_rate_limited,
    build_success,
    build_success_empty,
    build_unauthorized,
    build_validation_failure,
    paginate,
)
from api_envelope.models.responses import Envelope, PaginatedPayload
from api_envelope.models.users import CreateUserRequest, UpdateUserRequest, User

__all__ = [
    "CreateUserRequest",
    "Envelope",
    "Forbidden",
    "InternalFault",
    "InvalidArgumentError",
    "NotFound",
    "Outcome",
    "PaginatedPayload",
    "RateLimited",
    "Success",
    "SuccessEmpty",
    "Unauthorized",
    "UpdateUserRequest",
    "User",
    "ValidationFailed",
    "build_forbidden",
    "build_internal_fault",
    "build_not_found",
    "build_paginated",
    "build_rate_limited",
    "build_success",
    "build_success_empty",
    "build_unauthorized",
    "build_validation_failure",
    "paginate",
]

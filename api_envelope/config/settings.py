"""Pydantic Settings for the API service.

All environment variables use the ENVELOPE_ prefix.
Example: ENVELOPE_PORT=8000, ENVELOPE_SERVICE_KEY=my-secret-key
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class EnvelopeSettings(BaseSettings):
    """Service configuration validated from environment variables."""

    # Service
    port: int = 8000
    service_key: str  # X-Service-Key for auth
    log_level: str = "INFO"

    # Rate limiting (per client address)
    rate_limit_tokens: int = Field(default=60, ge=1)
    rate_limit_interval_seconds: int = Field(default=60, ge=1)

    # Pagination default for list endpoints
    default_page_limit: int = Field(default=10, ge=1)

    # Demo user store
    seed_users: bool = True

    model_config = {"env_prefix": "ENVELOPE_"}

"""Resilience package: per-client rate limiting."""

from api_envelope.resilience.rate_limiter import ClientRateLimiter, TokenBucket

__all__ = ["ClientRateLimiter", "TokenBucket"]

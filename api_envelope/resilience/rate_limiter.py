"""Per-client token bucket rate limiter.

Each client (usually the remote address) gets its own bucket holding at most
``tokens`` tokens, refilled continuously at ``tokens / interval`` per second.

Key behaviors:
- try_acquire() never blocks: it takes a token or reports the bucket empty
- Buckets are created lazily on first use
- Limiting one client does not affect other clients
- Buckets idle for longer than one interval are dropped; they would be
  full again by then, so a fresh bucket is equivalent
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class TokenBucket:
    """Token bucket state for a single client."""

    client: str
    tokens: float
    max_tokens: int
    refill_rate: float  # tokens per second
    last_refill: float  # time.monotonic()


class ClientRateLimiter:
    """Per-client token bucket rate limiter.

    Args:
        tokens: Max tokens per client bucket.
        interval_seconds: Time to refill an empty bucket completely.
    """

    def __init__(self, tokens: int = 60, interval_seconds: int = 60) -> None:
        if tokens < 1 or interval_seconds < 1:
            raise ValueError("tokens and interval_seconds must both be >= 1")
        self._tokens = tokens
        self._interval = interval_seconds
        self._buckets: dict[str, TokenBucket] = {}
        self._lock = asyncio.Lock()
        self._last_sweep = 0.0

    def _get_or_create_bucket(self, client: str) -> TokenBucket:
        if client not in self._buckets:
            self._buckets[client] = TokenBucket(
                client=client,
                tokens=float(self._tokens),
                max_tokens=self._tokens,
                refill_rate=self._tokens / self._interval,
                last_refill=time.monotonic(),
            )
        return self._buckets[client]

    def _refill(self, bucket: TokenBucket) -> None:
        """Refill tokens based on elapsed time since last refill."""
        now = time.monotonic()
        elapsed = now - bucket.last_refill
        if elapsed <= 0:
            return

        bucket.tokens = min(bucket.tokens + elapsed * bucket.refill_rate, float(bucket.max_tokens))
        bucket.last_refill = now

    def _evict_idle(self, now: float) -> None:
        """Drop buckets untouched for more than one interval, at most once per interval."""
        if now - self._last_sweep < self._interval:
            return
        self._last_sweep = now

        idle = [
            client
            for client, bucket in self._buckets.items()
            if now - bucket.last_refill > self._interval
        ]
        for client in idle:
            del self._buckets[client]
        if idle:
            logger.debug("Evicted %d idle rate-limit buckets", len(idle))

    async def try_acquire(self, client: str) -> bool:
        """Take one token for ``client``. Returns False when the bucket is empty."""
        async with self._lock:
            self._evict_idle(time.monotonic())
            bucket = self._get_or_create_bucket(client)
            self._refill(bucket)

            if bucket.tokens >= 1.0:
                bucket.tokens -= 1.0
                return True

        logger.warning("Rate limit exceeded for client %s", client, extra={"client": client})
        return False

    def get_stats(self, client: str) -> dict:
        """Current bucket stats for a client; defaults for unknown clients."""
        if client not in self._buckets:
            return {
                "current_tokens": float(self._tokens),
                "max_tokens": self._tokens,
                "refill_rate": self._tokens / self._interval,
            }

        bucket = self._buckets[client]
        self._refill(bucket)
        return {
            "current_tokens": bucket.tokens,
            "max_tokens": bucket.max_tokens,
            "refill_rate": bucket.refill_rate,
        }

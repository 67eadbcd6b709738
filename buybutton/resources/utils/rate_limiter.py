"""Token bucket rate limiter for per-shop-domain request pacing."""

import asyncio
import time
import weakref
from typing import Dict, Optional

from buybutton.config import settings


class TokenBucket:
    """Token bucket that starts full and refills at a constant rate.

    The lock serializing waiters belongs to one event loop, so the bucket
    keeps a lock per running loop. A limiter shared at module level can then
    be used from successive ``asyncio.run`` calls.
    """

    def __init__(self, rate: float, capacity: float):
        """Initialize token bucket.

        Args:
            rate: Tokens per second (rpm / 60)
            capacity: Burst size; the bucket starts full
        """
        self.rate = rate
        self.capacity = capacity
        self.tokens = capacity
        self.last_refill = time.monotonic()
        self._locks = weakref.WeakKeyDictionary()  # event loop -> asyncio.Lock

    def _lock_for_running_loop(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        lock = self._locks.get(loop)
        if lock is None:
            lock = self._locks[loop] = asyncio.Lock()
        return lock

    def _take(self, tokens: float) -> float:
        """Refill, then take tokens if available.

        Returns:
            Seconds to wait before the tokens can be taken, 0.0 when taken
        """
        now = time.monotonic()
        self.tokens = min(self.capacity, self.tokens + (now - self.last_refill) * self.rate)
        self.last_refill = now

        if self.tokens >= tokens:
            self.tokens -= tokens
            return 0.0
        return (tokens - self.tokens) / self.rate

    async def acquire(self, tokens: float = 1.0) -> None:
        """Take tokens from the bucket, sleeping until they are available."""
        async with self._lock_for_running_loop():
            delay = self._take(tokens)
            while delay:
                await asyncio.sleep(delay)
                delay = self._take(tokens)


class DomainRateLimiter:
    """Per-domain rate limiter.

    Every shop domain gets its own bucket so one busy storefront does not
    throttle requests to another.
    """

    def __init__(self, default_rpm: Optional[int] = None):
        """Initialize rate limiter.

        Args:
            default_rpm: Requests per minute for domains without a custom
                         limit (defaults to RATE_LIMIT_RPM)
        """
        self.default_rpm = default_rpm or settings.RATE_LIMIT_RPM
        self._buckets: Dict[str, TokenBucket] = {}

    @staticmethod
    def _bucket_for(rpm: int) -> TokenBucket:
        # Burst capacity is 10% of RPM, min 2
        return TokenBucket(rate=rpm / 60.0, capacity=max(2.0, rpm / 10.0))

    def _get_bucket(self, domain: str) -> TokenBucket:
        if domain not in self._buckets:
            self._buckets[domain] = self._bucket_for(self.default_rpm)
        return self._buckets[domain]

    async def acquire(self, domain: str, tokens: float = 1.0) -> None:
        """Block until the domain's rate limit allows another request.

        Args:
            domain: Host name being requested (e.g., "shop.myshopify.com")
            tokens: Number of tokens to acquire (default 1.0)
        """
        await self._get_bucket(domain).acquire(tokens)

    def set_custom_limit(self, domain: str, rpm: int) -> None:
        """Replace the bucket for a domain with one using a custom RPM."""
        self._buckets[domain] = self._bucket_for(rpm)

    def get_current_rate(self, domain: str) -> float:
        """Get the rate limit (RPM) currently applied to a domain."""
        return self._get_bucket(domain).rate * 60.0


_rate_limiter: Optional[DomainRateLimiter] = None


def get_rate_limiter() -> DomainRateLimiter:
    """Get the process-wide rate limiter shared by listings adapters."""
    global _rate_limiter
    if _rate_limiter is None:
        _rate_limiter = DomainRateLimiter()
    return _rate_limiter

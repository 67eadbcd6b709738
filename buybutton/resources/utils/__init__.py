"""Transport utilities for resource adapters."""

from .rate_limiter import DomainRateLimiter, TokenBucket, get_rate_limiter
from .retry import TRANSIENT_ERRORS, build_transport_retry


__all__ = [
    # Rate limiting
    "DomainRateLimiter",
    "TokenBucket",
    "get_rate_limiter",
    # Retry policy
    "TRANSIENT_ERRORS",
    "build_transport_retry",
]

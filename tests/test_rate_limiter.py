"""Tests for the per-domain rate limiter."""

import asyncio

from buybutton.resources.utils import DomainRateLimiter, TokenBucket


class TestTokenBucket:
    """Tests for TokenBucket."""

    async def test_acquire_consumes_tokens(self):
        bucket = TokenBucket(rate=1.0, capacity=5.0)

        await bucket.acquire()
        await bucket.acquire(2.0)

        assert bucket.tokens <= 2.5

    def test_waits_when_empty_across_separate_event_loops(self):
        bucket = TokenBucket(rate=1000.0, capacity=1.0)

        async def burst():
            await asyncio.gather(*[bucket.acquire() for _ in range(4)])

        asyncio.run(burst())
        asyncio.run(burst())

        assert bucket.tokens < 1.0


class TestDomainRateLimiter:
    """Tests for DomainRateLimiter."""

    def test_default_rate(self):
        limiter = DomainRateLimiter(default_rpm=120)

        assert limiter.get_current_rate("buckets-o-stuff.myshopify.com") == 120.0

    def test_custom_limit_replaces_bucket(self):
        limiter = DomainRateLimiter(default_rpm=120)
        limiter.set_custom_limit("buckets-o-stuff.myshopify.com", 30)

        assert limiter.get_current_rate("buckets-o-stuff.myshopify.com") == 30.0
        assert limiter.get_current_rate("other.myshopify.com") == 120.0

    async def test_domains_have_separate_buckets(self):
        limiter = DomainRateLimiter(default_rpm=60)

        await limiter.acquire("buckets-o-stuff.myshopify.com")

        assert limiter._get_bucket("buckets-o-stuff.myshopify.com") is not limiter._get_bucket(
            "other.myshopify.com"
        )

    def test_shared_limiter_serves_separate_event_loops(self):
        limiter = DomainRateLimiter(default_rpm=60)
        limiter._buckets["buckets-o-stuff.myshopify.com"] = TokenBucket(rate=1000.0, capacity=1.0)

        async def burst():
            await asyncio.gather(
                *[limiter.acquire("buckets-o-stuff.myshopify.com") for _ in range(8)]
            )

        asyncio.run(burst())
        asyncio.run(burst())

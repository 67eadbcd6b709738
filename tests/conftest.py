"""Pytest configuration and shared fixtures."""

import pytest

from buybutton import Config, ShopClient
from buybutton.resources.utils import DomainRateLimiter


CONFIG_ATTRS = {
    "myShopifyDomain": "buckets-o-stuff",
    "apiKey": 123,
    "channelId": "abc",
}


@pytest.fixture
def config() -> Config:
    """Config matching the buy button's sample shop."""
    return Config(**CONFIG_ATTRS)


@pytest.fixture
def shop_client(config: Config) -> ShopClient:
    """Shop client with the default registries."""
    return ShopClient(config)


@pytest.fixture
def rate_limiter() -> DomainRateLimiter:
    """Rate limiter generous enough that tests never wait on it."""
    return DomainRateLimiter(default_rpm=60000)

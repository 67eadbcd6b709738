"""Core building blocks shared across the client."""

from .exceptions import (
    BuyButtonException,
    ResourceTypeNotRegisteredError,
    AdapterError,
    SerializerError,
)

__all__ = [
    "BuyButtonException",
    "ResourceTypeNotRegisteredError",
    "AdapterError",
    "SerializerError",
]

"""Resource layer for fetching and serializing shop channel listings.

This package provides:
- Base adapter and serializer interfaces
- Registries mapping resource types to adapter/serializer factories
- Listings implementations and their default registrations
- Transport utilities for rate limiting and retries
"""

from .base import (
    ResourceAdapter,
    ResourceSerializer,
    ShopClientRef,
    AdapterFactory,
    SerializerFactory,
)
from .registry import ResourceRegistry, resolve_factory, validate_registries
from .register_resources import build_default_adapters, build_default_serializers

__all__ = [
    # Base classes
    "ResourceAdapter",
    "ResourceSerializer",
    "ShopClientRef",
    "AdapterFactory",
    "SerializerFactory",
    # Registries
    "ResourceRegistry",
    "resolve_factory",
    "validate_registries",
    "build_default_adapters",
    "build_default_serializers",
]

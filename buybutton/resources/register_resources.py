"""Default adapter and serializer registrations.

Every ShopClient built without explicit registries gets fresh copies of
these, so per-client overrides never leak into other clients.
"""

from buybutton.resources.adapters import CollectionListingsAdapter, ProductListingsAdapter
from buybutton.resources.registry import ResourceRegistry
from buybutton.resources.serializers import (
    CollectionListingsSerializer,
    ProductListingsSerializer,
)


DEFAULT_ADAPTERS = [
    ("products", ProductListingsAdapter),
    ("collections", CollectionListingsAdapter),
]

DEFAULT_SERIALIZERS = [
    ("products", ProductListingsSerializer),
    ("collections", CollectionListingsSerializer),
]


def build_default_adapters() -> ResourceRegistry:
    """Build a registry holding the listings adapters."""
    registry = ResourceRegistry("adapter")
    for resource_type, adapter_class in DEFAULT_ADAPTERS:
        registry.register(resource_type, adapter_class)
    return registry


def build_default_serializers() -> ResourceRegistry:
    """Build a registry holding the listings serializers."""
    registry = ResourceRegistry("serializer")
    for resource_type, serializer_class in DEFAULT_SERIALIZERS:
        registry.register(resource_type, serializer_class)
    return registry

"""Resource serializer implementations."""

from .listings import ListingsSerializer, ProductListingsSerializer, CollectionListingsSerializer

__all__ = [
    "ListingsSerializer",
    "ProductListingsSerializer",
    "CollectionListingsSerializer",
]

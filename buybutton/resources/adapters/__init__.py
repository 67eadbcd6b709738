"""Resource adapter implementations.

Each adapter inherits from ResourceAdapter and is registered for one
resource type.
"""

from .listings import ListingsAdapter, ProductListingsAdapter, CollectionListingsAdapter

__all__ = [
    "ListingsAdapter",
    "ProductListingsAdapter",
    "CollectionListingsAdapter",
]

"""Models returned by the listings serializers."""

from buybutton.models.base import ResourceModel
from buybutton.models.product import ProductModel
from buybutton.models.collection import CollectionModel

__all__ = [
    "ResourceModel",
    "ProductModel",
    "CollectionModel",
]

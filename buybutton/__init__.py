"""Buy button client for shop channel listings.

Fetches products and collections published to a shop channel and turns the
raw listings into models.
"""

from buybutton.config import Config, Settings, settings
from buybutton.core.exceptions import (
    BuyButtonException,
    ResourceTypeNotRegisteredError,
    AdapterError,
    SerializerError,
)
from buybutton.models import ResourceModel, ProductModel, CollectionModel
from buybutton.shop_client import ShopClient

__version__ = "0.1.0"

__all__ = [
    "ShopClient",
    "Config",
    "Settings",
    "settings",
    "BuyButtonException",
    "ResourceTypeNotRegisteredError",
    "AdapterError",
    "SerializerError",
    "ResourceModel",
    "ProductModel",
    "CollectionModel",
]

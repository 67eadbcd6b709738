"""Channel listings serializers.

A single listing arrives as ``{"product_listing": {...}}`` and a collection
as ``{"product_listings": [{...}, ...]}``; the root key follows the
resource type.
"""

from typing import Any, Dict, List, Type

import structlog

from buybutton.core.exceptions import SerializerError
from buybutton.models import CollectionModel, ProductModel, ResourceModel
from buybutton.resources.base import ResourceSerializer, ShopClientRef


logger = structlog.get_logger(__name__)


class ListingsSerializer(ResourceSerializer):
    """Turns listings payloads into models bound to the calling client."""

    model_class: Type[ResourceModel] = ResourceModel

    @property
    def singular_name(self) -> str:
        if self.resource_type.endswith("s"):
            return self.resource_type[:-1]
        return self.resource_type

    @property
    def single_root_key(self) -> str:
        return f"{self.singular_name}_listing"

    @property
    def collection_root_key(self) -> str:
        return f"{self.singular_name}_listings"

    def _extract(self, raw: Any, root_key: str, expected: type) -> Any:
        if not isinstance(raw, dict) or root_key not in raw:
            raise SerializerError(self.resource_type, f"payload is missing '{root_key}'")

        payload = raw[root_key]
        if not isinstance(payload, expected):
            raise SerializerError(
                self.resource_type,
                f"'{root_key}' must be a {expected.__name__}, got {type(payload).__name__}",
            )
        return payload

    def model_for(self, attrs: Dict[str, Any], shop_client: ShopClientRef) -> ResourceModel:
        if not isinstance(attrs, dict):
            raise SerializerError(self.resource_type, f"listing must be a dict, got {type(attrs).__name__}")
        return self.model_class(attrs=attrs, shop_client=shop_client)

    def serialize_single(self, raw: Any, shop_client: ShopClientRef) -> ResourceModel:
        attrs = self._extract(raw, self.single_root_key, dict)
        return self.model_for(attrs, shop_client)

    def serialize_collection(self, raw: Any, shop_client: ShopClientRef) -> List[ResourceModel]:
        listings = self._extract(raw, self.collection_root_key, list)
        models = [self.model_for(attrs, shop_client) for attrs in listings]

        logger.debug(
            "listings_serialized",
            resource_type=self.resource_type,
            count=len(models),
        )
        return models


class ProductListingsSerializer(ListingsSerializer):
    resource_type = "products"
    model_class = ProductModel


class CollectionListingsSerializer(ListingsSerializer):
    resource_type = "collections"
    model_class = CollectionModel

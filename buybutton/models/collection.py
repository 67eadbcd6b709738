"""Collection model."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from buybutton.models.base import ResourceModel


@dataclass
class CollectionModel(ResourceModel):
    """A collection listing published to the channel."""

    @property
    def id(self) -> Any:
        return self.attrs.get("collection_id", self.attrs.get("id"))

    @property
    def image(self) -> Optional[Dict[str, Any]]:
        return self.attrs.get("image")

    async def fetch_products(self) -> List[Any]:
        """Fetch the products listed in this collection.

        Uses the client that serialized this collection.

        Raises:
            ValueError: If the model was built without a client reference
        """
        if self.shop_client is None:
            raise ValueError("CollectionModel has no shop client to fetch products with")
        return await self.shop_client.fetch_query("products", {"collection_id": self.id})

"""Product model."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from buybutton.models.base import ResourceModel


@dataclass
class ProductModel(ResourceModel):
    """A product listing published to the channel."""

    @property
    def id(self) -> Any:
        # Listings carry the product id alongside their own listing id
        return self.attrs.get("product_id", self.attrs.get("id"))

    @property
    def description(self) -> str:
        return self.attrs.get("body_html") or ""

    @property
    def images(self) -> List[Dict[str, Any]]:
        return self.attrs.get("images") or []

    @property
    def variants(self) -> List[Dict[str, Any]]:
        return self.attrs.get("variants") or []

    @property
    def options(self) -> List[Dict[str, Any]]:
        return self.attrs.get("options") or []

    def get_variant(self, variant_id: Any) -> Optional[Dict[str, Any]]:
        """Find a variant by id.

        Args:
            variant_id: Variant identifier

        Returns:
            Variant dict, or None if the product has no such variant
        """
        for variant in self.variants:
            if variant.get("id") == variant_id:
                return variant
        return None

"""Base model shared by all serialized resources."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from buybutton.resources.base import ShopClientRef


@dataclass
class ResourceModel:
    """Consumer-facing wrapper around one listing payload.

    ``attrs`` holds the listing exactly as the serializer received it.
    ``shop_client`` is the client that produced the model; it is left out
    of equality and repr.
    """

    attrs: Dict[str, Any]
    shop_client: Optional["ShopClientRef"] = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        """Validate data after initialization."""
        if not isinstance(self.attrs, dict):
            raise ValueError("attrs must be a dict")

    @property
    def id(self) -> Any:
        return self.attrs.get("id")

    @property
    def title(self) -> str:
        return self.attrs.get("title", "")

    @property
    def handle(self) -> Optional[str]:
        return self.attrs.get("handle")

    def get(self, key: str, default: Any = None) -> Any:
        """Read a raw attribute that has no dedicated property."""
        return self.attrs.get(key, default)

"""Base resource adapter and serializer interfaces.

Every resource type ("products", "collections", ...) is served by one
adapter class and one serializer class. Adapters retrieve raw payloads,
serializers turn those payloads into models. Both are constructed fresh for
every client call with the shared Config.
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, List, Optional, Protocol, runtime_checkable

import structlog

from buybutton.config import Config


@runtime_checkable
class ShopClientRef(Protocol):
    """Read-only view of the client handed to serializers and models.

    Serializers receive the calling client itself, typed down to this
    protocol so models can issue follow-up fetches without touching the
    client's registries.
    """

    @property
    def config(self) -> Config: ...

    def fetch_all(self, resource_type: str) -> Awaitable[List[Any]]: ...

    def fetch_one(self, resource_type: str, resource_id: Any) -> Awaitable[Any]: ...

    def fetch_query(self, resource_type: str, query: Any) -> Awaitable[List[Any]]: ...


class ResourceAdapter(ABC):
    """Abstract base class for resource adapters.

    Adapters own everything transport related: URLs, headers, retries and
    timeouts. The raw payload they return is opaque to the client.
    """

    resource_type: str = ""  # Overridden in subclass (e.g., "products")

    def __init__(self, config: Config):
        """Initialize the adapter with the shared client config."""
        self.config = config
        self.logger = structlog.get_logger(adapter=self.resource_type)

    @abstractmethod
    async def fetch_single(self, resource_id: Any) -> Any:
        """Fetch the raw payload for one record.

        Args:
            resource_id: Resource-specific identifier, passed through untouched

        Returns:
            Raw, unserialized payload
        """
        pass

    @abstractmethod
    async def fetch_collection(self, query: Optional[Any] = None) -> Any:
        """Fetch the raw payload for a set of records.

        Args:
            query: Optional resource-specific filter, passed through untouched

        Returns:
            Raw, unserialized payload
        """
        pass


class ResourceSerializer(ABC):
    """Abstract base class for resource serializers.

    Serialization is synchronous and runs only after the adapter's fetch
    has succeeded.
    """

    resource_type: str = ""

    def __init__(self, config: Config):
        """Initialize the serializer with the shared client config."""
        self.config = config

    @abstractmethod
    def serialize_single(self, raw: Any, shop_client: ShopClientRef) -> Any:
        """Turn a single-record payload into a model."""
        pass

    @abstractmethod
    def serialize_collection(self, raw: Any, shop_client: ShopClientRef) -> List[Any]:
        """Turn a multi-record payload into a list of models."""
        pass


AdapterFactory = Callable[[Config], ResourceAdapter]
SerializerFactory = Callable[[Config], ResourceSerializer]

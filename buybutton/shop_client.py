"""Shop client: fetches resources through adapters and serializes them.

For every call the client looks up the adapter and serializer registered
for the resource type, builds a fresh adapter with its config, awaits the
fetch, and only then builds the serializer and hands it the raw payload
together with the client itself.
"""

from collections.abc import Mapping
from typing import Any, Awaitable, Callable, List, Optional, Tuple

import structlog

from buybutton.config import Config
from buybutton.resources.base import ResourceAdapter, ResourceSerializer
from buybutton.resources.register_resources import (
    build_default_adapters,
    build_default_serializers,
)
from buybutton.resources.registry import resolve_factory, validate_registries


logger = structlog.get_logger(__name__)


class ShopClient:
    """Entry point for fetching shop resources as models.

    ``adapters`` and ``serializers`` are per-client mappings from resource
    type to factory and may be reassigned at any time; every call reads
    them afresh.

    The fetch methods resolve the resource type and construct the adapter
    immediately, then return an awaitable that runs the fetch and the
    serialization. An unknown resource type therefore raises
    ResourceTypeNotRegisteredError at call time, before anything is awaited.
    Adapter and serializer exceptions reach the awaiting caller unchanged.
    """

    def __init__(
        self,
        config: Config,
        adapters: Optional[Mapping] = None,
        serializers: Optional[Mapping] = None,
    ):
        """Initialize shop client.

        Args:
            config: Connection config, shared by reference with every
                    adapter and serializer
            adapters: Optional mapping of resource type to adapter factory
            serializers: Optional mapping of resource type to serializer factory

        Passing only one mapping keeps the defaults for the other; a type
        then missing from one side fails when it is fetched.

        Raises:
            ResourceTypeNotRegisteredError: If both mappings are given and a
                                            resource type is in only one
        """
        self._config = config
        if adapters is not None and serializers is not None:
            validate_registries(adapters, serializers)

        self.adapters = adapters if adapters is not None else build_default_adapters()
        self.serializers = serializers if serializers is not None else build_default_serializers()

        self.logger = logger.bind(client="shop_client", domain=getattr(config, "domain", None))

    @property
    def config(self) -> Config:
        return self._config

    def fetch_all(self, resource_type: str) -> Awaitable[List[Any]]:
        """Fetch every record of a resource type.

        Args:
            resource_type: Resource type key (e.g., "products")

        Returns:
            Awaitable resolving to the serializer's list of models
        """
        adapter, serializer_factory = self._prepare(resource_type)
        return self._run(
            resource_type,
            "fetch_all",
            fetch=lambda: adapter.fetch_collection(),
            serializer_factory=serializer_factory,
            serialize=lambda serializer, raw: serializer.serialize_collection(raw, self),
        )

    def fetch_one(self, resource_type: str, resource_id: Any) -> Awaitable[Any]:
        """Fetch a single record by id.

        Args:
            resource_type: Resource type key
            resource_id: Identifier passed to the adapter unchanged

        Returns:
            Awaitable resolving to the serialized model
        """
        adapter, serializer_factory = self._prepare(resource_type)
        return self._run(
            resource_type,
            "fetch_one",
            fetch=lambda: adapter.fetch_single(resource_id),
            serializer_factory=serializer_factory,
            serialize=lambda serializer, raw: serializer.serialize_single(raw, self),
        )

    def fetch_query(self, resource_type: str, query: Any) -> Awaitable[List[Any]]:
        """Fetch the records matching a query.

        Args:
            resource_type: Resource type key
            query: Filter object passed to the adapter unchanged
                   (e.g., {"product_ids": [1, 2, 3]})

        Returns:
            Awaitable resolving to the serializer's list of models
        """
        adapter, serializer_factory = self._prepare(resource_type)
        return self._run(
            resource_type,
            "fetch_query",
            fetch=lambda: adapter.fetch_collection(query),
            serializer_factory=serializer_factory,
            serialize=lambda serializer, raw: serializer.serialize_collection(raw, self),
        )

    # Convenience wrappers

    def fetch_all_products(self) -> Awaitable[List[Any]]:
        return self.fetch_all("products")

    def fetch_product(self, product_id: Any) -> Awaitable[Any]:
        return self.fetch_one("products", product_id)

    def fetch_query_products(self, query: Any) -> Awaitable[List[Any]]:
        return self.fetch_query("products", query)

    def fetch_all_collections(self) -> Awaitable[List[Any]]:
        return self.fetch_all("collections")

    def fetch_collection(self, collection_id: Any) -> Awaitable[Any]:
        return self.fetch_one("collections", collection_id)

    def fetch_query_collections(self, query: Any) -> Awaitable[List[Any]]:
        return self.fetch_query("collections", query)

    def _prepare(self, resource_type: str) -> Tuple[ResourceAdapter, Callable[..., ResourceSerializer]]:
        """Resolve both factories, then build the adapter.

        Raises:
            ResourceTypeNotRegisteredError: If either registry lacks the type
        """
        adapter_factory = resolve_factory(self.adapters, resource_type, "adapter")
        serializer_factory = resolve_factory(self.serializers, resource_type, "serializer")
        return adapter_factory(self._config), serializer_factory

    async def _run(
        self,
        resource_type: str,
        operation: str,
        fetch: Callable[[], Awaitable[Any]],
        serializer_factory: Callable[..., ResourceSerializer],
        serialize: Callable[[ResourceSerializer, Any], Any],
    ) -> Any:
        self.logger.debug("resource_fetch_started", resource_type=resource_type, operation=operation)

        raw = await fetch()

        # Serializer is only built once the fetch succeeded
        serializer = serializer_factory(self._config)
        result = serialize(serializer, raw)

        self.logger.debug("resource_fetch_serialized", resource_type=resource_type, operation=operation)
        return result

    def __repr__(self) -> str:
        return f"ShopClient(domain={getattr(self._config, 'domain', None)!r})"

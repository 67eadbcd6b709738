"""Registries mapping resource types to adapter and serializer factories."""

from collections.abc import Mapping
from typing import Callable, Dict, Iterator, List

import structlog

from buybutton.core.exceptions import ResourceTypeNotRegisteredError


logger = structlog.get_logger(__name__)


class ResourceRegistry(Mapping):
    """Mapping of resource type keys to factories taking a Config.

    A registry is a read-only ``Mapping`` for lookups, so the client can be
    handed either a ResourceRegistry or a plain dict. Factories are usually
    the adapter/serializer classes themselves.
    """

    def __init__(self, kind: str):
        """Initialize an empty registry.

        Args:
            kind: What the registry holds ("adapter" or "serializer"),
                  used in lookup errors
        """
        self.kind = kind
        self._factories: Dict[str, Callable] = {}

    def register(self, resource_type: str, factory: Callable) -> None:
        """Register a factory for a resource type.

        Args:
            resource_type: Resource type key (e.g., "products")
            factory: Callable taking a Config and returning an instance

        Raises:
            ValueError: If the key is empty, the factory is not callable, or
                        the key is already registered
        """
        if not resource_type or not isinstance(resource_type, str):
            raise ValueError("Resource type must be a non-empty string")

        if not callable(factory):
            raise ValueError(f"{self.kind.capitalize()} factory must be callable: {factory!r}")

        if resource_type in self._factories:
            raise ValueError(f"Resource type '{resource_type}' already has a {self.kind} registered")

        self._factories[resource_type] = factory
        logger.debug(
            "resource_registered",
            kind=self.kind,
            resource_type=resource_type,
            factory=getattr(factory, "__name__", repr(factory)),
        )

    def resolve(self, resource_type: str) -> Callable:
        """Look up the factory for a resource type.

        Raises:
            ResourceTypeNotRegisteredError: If nothing is registered for the key
        """
        return resolve_factory(self, resource_type, self.kind)

    def get_registered_types(self) -> List[str]:
        """Get list of registered resource type keys."""
        return list(self._factories.keys())

    def has(self, resource_type: str) -> bool:
        """Check if a factory is registered for a resource type."""
        return resource_type in self._factories

    def __getitem__(self, resource_type: str) -> Callable:
        return self._factories[resource_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"ResourceRegistry(kind={self.kind!r}, types={self.get_registered_types()!r})"


def resolve_factory(registry: Mapping, resource_type: str, kind: str) -> Callable:
    """Look up a factory in any mapping, raising a LookupError when missing.

    Args:
        registry: Mapping of resource type keys to factories
        resource_type: Key to look up
        kind: "adapter" or "serializer", reported in the error

    Returns:
        The registered factory

    Raises:
        ResourceTypeNotRegisteredError: If the key is absent
    """
    factory = registry.get(resource_type)
    if factory is None:
        raise ResourceTypeNotRegisteredError(resource_type, kind)
    return factory


def validate_registries(adapters: Mapping, serializers: Mapping) -> None:
    """Check that adapters and serializers cover the same resource types.

    Raises:
        ResourceTypeNotRegisteredError: For the first key registered on one
                                        side only
    """
    for resource_type in adapters:
        if resource_type not in serializers:
            raise ResourceTypeNotRegisteredError(resource_type, "serializer")

    for resource_type in serializers:
        if resource_type not in adapters:
            raise ResourceTypeNotRegisteredError(resource_type, "adapter")

"""Custom exception classes for the buy button client."""


class BuyButtonException(Exception):
    """Base exception for all buy button errors."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class ResourceTypeNotRegisteredError(BuyButtonException, LookupError):
    """Raised when a resource type has no adapter or serializer registered."""

    def __init__(self, resource_type: str, registry: str):
        self.resource_type = resource_type
        self.registry = registry
        super().__init__(
            f"No {registry} registered for resource type '{resource_type}'"
        )


class AdapterError(BuyButtonException):
    """Raised when an adapter receives a payload it cannot hand on."""

    def __init__(self, resource_type: str, message: str):
        self.resource_type = resource_type
        super().__init__(f"Adapter error for {resource_type}: {message}")


class SerializerError(BuyButtonException):
    """Raised when a serializer cannot turn a payload into models."""

    def __init__(self, resource_type: str, message: str):
        self.resource_type = resource_type
        super().__init__(f"Serializer error for {resource_type}: {message}")

"""Channel listings API adapters.

Fetches published listings for a shop channel:
    https://{domain}.myshopify.com/api/channels/{channel_id}/{resource}_listings
"""

import base64
from collections.abc import Mapping
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from buybutton.config import Config, settings
from buybutton.core.exceptions import AdapterError
from buybutton.resources.base import ResourceAdapter
from buybutton.resources.utils.rate_limiter import DomainRateLimiter, get_rate_limiter
from buybutton.resources.utils.retry import build_transport_retry


class ListingsAdapter(ResourceAdapter):
    """Adapter for the channel listings API.

    Subclasses bind ``resource_type``. A single record lives at
    ``/{singular}_listings/{id}`` and a collection at ``/{singular}_listings``.
    """

    API_HOST_SUFFIX = ".myshopify.com"

    def __init__(
        self,
        config: Config,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rate_limiter: Optional[DomainRateLimiter] = None,
        max_attempts: Optional[int] = None,
    ):
        """Initialize listings adapter.

        Args:
            config: Shared client config
            transport: Optional httpx transport (tests use httpx.MockTransport)
            rate_limiter: Optional limiter, defaults to the shared one
            max_attempts: Optional retry attempts, defaults to HTTP_MAX_RETRIES
        """
        super().__init__(config)
        self.transport = transport
        self.rate_limiter = rate_limiter or get_rate_limiter()
        self.max_attempts = max_attempts
        self.retry_wait = None  # Exponential backoff unless overridden

        # HTTP client is created per request to avoid lifecycle issues
        self._timeout = settings.HTTP_TIMEOUT

    @property
    def singular_name(self) -> str:
        if self.resource_type.endswith("s"):
            return self.resource_type[:-1]
        return self.resource_type

    @property
    def host(self) -> str:
        return f"{self.config.domain}{self.API_HOST_SUFFIX}"

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/api/channels/{self.config.channel_id}"

    @property
    def headers(self) -> Dict[str, str]:
        token = base64.b64encode(str(self.config.api_key).encode("utf-8")).decode("ascii")
        return {
            "Authorization": f"Basic {token}",
            "Content-Type": "application/json",
        }

    def collection_path(self) -> str:
        return f"/{self.singular_name}_listings"

    def single_path(self, resource_id: Any) -> str:
        return f"{self.collection_path()}/{quote(str(resource_id), safe='')}"

    def encode_query(self, query: Optional[Any]) -> Dict[str, Any]:
        """Turn a query mapping into URL parameters.

        List and tuple values become comma-separated strings, so
        ``{"product_ids": [1, 2, 3]}`` is sent as ``product_ids=1,2,3``.

        Raises:
            AdapterError: If the query is not a mapping
        """
        if query is None:
            return {}
        if not isinstance(query, Mapping):
            raise AdapterError(self.resource_type, f"query must be a mapping, got {type(query).__name__}")

        params = {}
        for key, value in query.items():
            if isinstance(value, (list, tuple)):
                value = ",".join(str(item) for item in value)
            params[key] = value
        return params

    async def fetch_single(self, resource_id: Any) -> Dict[str, Any]:
        return await self._get(self.single_path(resource_id))

    async def fetch_collection(self, query: Optional[Any] = None) -> Dict[str, Any]:
        return await self._get(self.collection_path(), params=self.encode_query(query))

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """GET a listings path, retrying transient transport failures."""
        url = f"{self.base_url}{path}"
        async for attempt in build_transport_retry(self.max_attempts, self.retry_wait):
            with attempt:
                return await self._send(url, params)

    async def _send(self, url: str, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Make one request to the listings API.

        Returns:
            Decoded JSON object

        Raises:
            httpx.HTTPStatusError: If the API returns an error status
            httpx.TimeoutException: If the request times out
            httpx.NetworkError: If a network error occurs
            AdapterError: If the body is not a JSON object
        """
        await self.rate_limiter.acquire(self.host)

        self.logger.debug("listings_request", url=url, params=params)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                headers=self.headers,
                transport=self.transport,
            ) as client:
                response = await client.get(url, params=params or None)
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            self.logger.error(
                "listings_http_error",
                url=url,
                status_code=e.response.status_code,
            )
            raise

        except httpx.TimeoutException as e:
            self.logger.warning("listings_timeout", url=url, error=str(e))
            raise

        except httpx.NetworkError as e:
            self.logger.warning("listings_network_error", url=url, error=str(e))
            raise

        try:
            data = response.json()
        except ValueError as e:
            self.logger.error("listings_invalid_json", url=url)
            raise AdapterError(self.resource_type, "response body is not valid JSON") from e

        if not isinstance(data, dict):
            raise AdapterError(self.resource_type, f"expected a JSON object, got {type(data).__name__}")

        self.logger.debug("listings_request_success", url=url)
        return data


class ProductListingsAdapter(ListingsAdapter):
    """Fetches product listings."""

    resource_type = "products"


class CollectionListingsAdapter(ListingsAdapter):
    """Fetches collection listings."""

    resource_type = "collections"

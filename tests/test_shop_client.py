"""Tests for ShopClient orchestration.

Covers:
- Config retention and per-call adapter/serializer construction
- Fetch-then-serialize chaining for fetch_all, fetch_one and fetch_query
- Error propagation and registry lookup failures
- Client identity passed to serializers
"""

import asyncio

import pytest

from buybutton import Config, ShopClient, ResourceTypeNotRegisteredError
from buybutton.resources import ResourceAdapter, ResourceRegistry, ResourceSerializer


RAW_MODEL = {"props": "some-object"}


# ============================================================================
# FAKES
# ============================================================================

class Recorder:
    """Collects what fake adapters and serializers were asked to do."""

    def __init__(self):
        self.events = []
        self.raw = RAW_MODEL
        self.serialized_single = {"attrs": "serialized-model"}
        self.serialized_collection = [{"attrs": "serialized-model"}]
        self.fetch_error = None
        self.serialize_error = None

    def names(self):
        return [event[0] for event in self.events]

    def find(self, name):
        return [event for event in self.events if event[0] == name]

    def adapter_factory(self, config):
        return FakeAdapter(config, self)

    def serializer_factory(self, config):
        return FakeSerializer(config, self)


class FakeAdapter(ResourceAdapter):
    resource_type = "products"

    def __init__(self, config, recorder):
        super().__init__(config)
        self.recorder = recorder
        recorder.events.append(("adapter_constructed", config))

    async def fetch_single(self, resource_id):
        self.recorder.events.append(("fetch_single", resource_id))
        await asyncio.sleep(0)
        if self.recorder.fetch_error:
            raise self.recorder.fetch_error
        return self.recorder.raw

    async def fetch_collection(self, query=None):
        self.recorder.events.append(("fetch_collection", query))
        await asyncio.sleep(0)
        if self.recorder.fetch_error:
            raise self.recorder.fetch_error
        return self.recorder.raw


class FakeSerializer(ResourceSerializer):
    resource_type = "products"

    def __init__(self, config, recorder):
        super().__init__(config)
        self.recorder = recorder
        recorder.events.append(("serializer_constructed", config))

    def serialize_single(self, raw, shop_client):
        self.recorder.events.append(("serialize_single", raw, shop_client))
        if self.recorder.serialize_error:
            raise self.recorder.serialize_error
        return self.recorder.serialized_single

    def serialize_collection(self, raw, shop_client):
        self.recorder.events.append(("serialize_collection", raw, shop_client))
        if self.recorder.serialize_error:
            raise self.recorder.serialize_error
        return self.recorder.serialized_collection


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def client(config: Config, recorder: Recorder) -> ShopClient:
    """Client whose "products" and "collections" go through the fakes."""
    shop_client = ShopClient(config)
    shop_client.adapters = {
        "products": recorder.adapter_factory,
        "collections": recorder.adapter_factory,
    }
    shop_client.serializers = {
        "products": recorder.serializer_factory,
        "collections": recorder.serializer_factory,
    }
    return shop_client


OPERATIONS = [
    ("fetch_all", ()),
    ("fetch_one", (1,)),
    ("fetch_query", ({"product_ids": [1, 2, 3]},)),
]


# ============================================================================
# TESTS: CONSTRUCTION
# ============================================================================

class TestConstruction:
    """Tests for ShopClient construction."""

    def test_retains_reference_to_config(self, config: Config):
        shop_client = ShopClient(config)

        assert shop_client.config is config

    def test_config_is_read_only(self, shop_client: ShopClient, config: Config):
        with pytest.raises(AttributeError):
            shop_client.config = Config(domain="other", api_key="key", channel_id="1")

        assert shop_client.config is config

    def test_default_registries_cover_listings(self, shop_client: ShopClient):
        assert isinstance(shop_client.adapters, ResourceRegistry)
        assert isinstance(shop_client.serializers, ResourceRegistry)
        assert sorted(shop_client.adapters) == ["collections", "products"]
        assert sorted(shop_client.serializers) == ["collections", "products"]

    def test_default_registries_are_per_client(self, config: Config):
        first = ShopClient(config)
        second = ShopClient(config)

        assert first.adapters is not second.adapters
        assert first.serializers is not second.serializers

    def test_mismatched_registries_rejected(self, config: Config, recorder: Recorder):
        with pytest.raises(ResourceTypeNotRegisteredError) as exc_info:
            ShopClient(
                config,
                adapters={"products": recorder.adapter_factory},
                serializers={},
            )

        assert exc_info.value.resource_type == "products"
        assert exc_info.value.registry == "serializer"

    def test_partial_override_keeps_other_defaults(self, config: Config, recorder: Recorder):
        shop_client = ShopClient(config, adapters={"products": recorder.adapter_factory})

        assert sorted(shop_client.serializers) == ["collections", "products"]

        with pytest.raises(ResourceTypeNotRegisteredError) as exc_info:
            shop_client.fetch_all("collections")

        assert exc_info.value.registry == "adapter"
        assert recorder.events == []


# ============================================================================
# TESTS: ADAPTER AND SERIALIZER CONSTRUCTION
# ============================================================================

class TestInstantiation:
    """Tests for per-call adapter and serializer construction."""

    @pytest.mark.parametrize("operation,args", OPERATIONS)
    async def test_inits_adapter_with_config(
        self, client: ShopClient, recorder: Recorder, config: Config, operation, args
    ):
        await getattr(client, operation)("products", *args)

        constructed = recorder.find("adapter_constructed")
        assert len(constructed) == 1
        assert constructed[0][1] is config

    @pytest.mark.parametrize("operation,args", OPERATIONS)
    async def test_inits_serializer_with_config(
        self, client: ShopClient, recorder: Recorder, config: Config, operation, args
    ):
        await getattr(client, operation)("products", *args)

        constructed = recorder.find("serializer_constructed")
        assert len(constructed) == 1
        assert constructed[0][1] is config

    async def test_adapter_constructed_at_call_time(self, client: ShopClient, recorder: Recorder):
        pending = client.fetch_all("products")

        assert recorder.names() == ["adapter_constructed"]

        await pending

    async def test_each_call_gets_fresh_instances(self, client: ShopClient, recorder: Recorder):
        await client.fetch_one("products", 1)
        await client.fetch_one("products", 2)

        assert recorder.names().count("adapter_constructed") == 2
        assert recorder.names().count("serializer_constructed") == 2

    async def test_registries_are_read_on_every_call(self, client: ShopClient, config: Config):
        replacement = Recorder()
        replacement.serialized_single = {"attrs": "replacement"}

        client.adapters = {"products": replacement.adapter_factory}
        client.serializers = {"products": replacement.serializer_factory}

        product = await client.fetch_one("products", 1)

        assert product == {"attrs": "replacement"}
        assert replacement.find("adapter_constructed")[0][1] is config


# ============================================================================
# TESTS: FETCH AND SERIALIZE CHAINING
# ============================================================================

class TestChaining:
    """Tests for piping adapter results through serializers."""

    async def test_fetch_all_chains_fetch_collection_through_serializer(
        self, client: ShopClient, recorder: Recorder
    ):
        products = await client.fetch_all("products")

        assert recorder.names() == [
            "adapter_constructed",
            "fetch_collection",
            "serializer_constructed",
            "serialize_collection",
        ]
        assert recorder.find("fetch_collection")[0][1] is None

        _, raw, client_ref = recorder.find("serialize_collection")[0]
        assert raw is RAW_MODEL
        assert client_ref is client
        assert products is recorder.serialized_collection
        assert products == [{"attrs": "serialized-model"}]

    async def test_fetch_one_chains_fetch_single_through_serializer(
        self, client: ShopClient, recorder: Recorder
    ):
        product = await client.fetch_one("products", 1)

        assert recorder.names() == [
            "adapter_constructed",
            "fetch_single",
            "serializer_constructed",
            "serialize_single",
        ]
        assert recorder.find("fetch_single")[0][1] == 1

        _, raw, client_ref = recorder.find("serialize_single")[0]
        assert raw is RAW_MODEL
        assert client_ref is client
        assert product == {"attrs": "serialized-model"}

    async def test_fetch_query_forwards_query_unchanged(
        self, client: ShopClient, recorder: Recorder
    ):
        query = {"product_ids": [1, 2, 3]}

        products = await client.fetch_query("products", query)

        assert recorder.find("fetch_collection")[0][1] is query
        _, raw, client_ref = recorder.find("serialize_collection")[0]
        assert raw is RAW_MODEL
        assert client_ref is client
        assert products is recorder.serialized_collection

    async def test_passes_client_reference_to_concurrent_calls(
        self, client: ShopClient, recorder: Recorder
    ):
        await asyncio.gather(
            client.fetch_one("products", 1),
            client.fetch_all("products"),
        )

        # Both fetches start before either result is serialized
        assert recorder.names()[2:4] == ["fetch_single", "fetch_collection"]
        assert recorder.find("serialize_single")[0][2] is client
        assert recorder.find("serialize_collection")[0][2] is client

    async def test_convenience_wrappers_use_matching_types(
        self, client: ShopClient, recorder: Recorder
    ):
        await client.fetch_product(7)
        await client.fetch_query_collections({"handle": "summer"})

        assert recorder.find("fetch_single")[0][1] == 7
        assert recorder.find("fetch_collection")[0][1] == {"handle": "summer"}


# ============================================================================
# TESTS: ERROR HANDLING
# ============================================================================

class TestErrorHandling:
    """Tests for error propagation and lookup failures."""

    @pytest.mark.parametrize("operation,args", OPERATIONS)
    async def test_adapter_failure_propagates_without_serializing(
        self, client: ShopClient, recorder: Recorder, operation, args
    ):
        error = RuntimeError("connection reset")
        recorder.fetch_error = error

        with pytest.raises(RuntimeError) as exc_info:
            await getattr(client, operation)("products", *args)

        assert exc_info.value is error
        assert "serializer_constructed" not in recorder.names()

    @pytest.mark.parametrize("operation,args", OPERATIONS)
    async def test_serializer_failure_propagates(
        self, client: ShopClient, recorder: Recorder, operation, args
    ):
        error = KeyError("product_listings")
        recorder.serialize_error = error

        with pytest.raises(KeyError) as exc_info:
            await getattr(client, operation)("products", *args)

        assert exc_info.value is error

    @pytest.mark.parametrize("operation,args", OPERATIONS)
    def test_unregistered_type_raises_before_construction(
        self, client: ShopClient, recorder: Recorder, operation, args
    ):
        with pytest.raises(LookupError) as exc_info:
            getattr(client, operation)("widgets", *args)

        assert isinstance(exc_info.value, ResourceTypeNotRegisteredError)
        assert exc_info.value.registry == "adapter"
        assert exc_info.value.resource_type == "widgets"
        assert recorder.events == []

    def test_missing_serializer_raises_before_adapter_construction(
        self, client: ShopClient, recorder: Recorder
    ):
        client.adapters = {"widgets": recorder.adapter_factory}
        client.serializers = {}

        with pytest.raises(ResourceTypeNotRegisteredError) as exc_info:
            client.fetch_one("widgets", 1)

        assert exc_info.value.registry == "serializer"
        assert str(exc_info.value) == "No serializer registered for resource type 'widgets'"
        assert recorder.events == []

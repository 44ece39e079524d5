import logging

import pytest

from vulcan_qa.shared.context import ScenarioContext, ScenarioKeys
from vulcan_qa.shared.registries import ApiClientRegistry, DataRegistry, api_clients, data_registry


class FakeClient:
    instances = 0

    def __init__(self):
        FakeClient.instances += 1
        self.closed = False

    def close(self):
        self.closed = True


class BrokenClient(FakeClient):
    def close(self):
        raise RuntimeError("socket already gone")


def test_cleanup_runs_in_reverse_registration_order():
    registry = DataRegistry()
    order = []
    registry.register_cleanup(lambda: order.append("user"))
    registry.register_cleanup(lambda: order.append("order"))
    registry.register_cleanup(lambda: order.append("payment"))

    assert len(registry) == 3
    assert registry.cleanup_all() == 0
    assert order == ["payment", "order", "user"]
    assert registry.is_empty()


def test_failing_cleanup_does_not_stop_the_rest(caplog):
    registry = DataRegistry()
    order = []

    def explode():
        raise RuntimeError("delete failed")

    registry.register_cleanup(lambda: order.append("first"))
    registry.register_cleanup(explode)
    registry.register_cleanup(lambda: order.append("last"))

    with caplog.at_level(logging.WARNING):
        failures = registry.cleanup_all()

    assert failures == 1
    assert order == ["last", "first"]
    assert "delete failed" in caplog.text
    assert registry.is_empty()


def test_register_cleanup_rejects_none():
    with pytest.raises(TypeError):
        DataRegistry().register_cleanup(None)


def test_client_registry_creates_lazily_and_reuses():
    registry = ApiClientRegistry()
    before = FakeClient.instances

    first = registry.get(FakeClient)
    second = registry.get(FakeClient)

    assert first is second
    assert FakeClient.instances == before + 1
    assert len(registry) == 1


def test_client_registry_uses_factory():
    registry = ApiClientRegistry()
    made = FakeClient()
    assert registry.get(FakeClient, lambda: made) is made


def test_client_registry_rejects_wrong_entry_type():
    registry = ApiClientRegistry()
    registry.get(FakeClient, lambda: object())
    with pytest.raises(TypeError, match="not of the expected type"):
        registry.get(FakeClient)


def test_client_registry_clear_closes_clients_even_if_one_fails():
    registry = ApiClientRegistry()
    good = registry.get(FakeClient)
    registry.get(BrokenClient)

    registry.clear()

    assert good.closed
    assert len(registry) == 0


def test_scenario_helpers_store_registries_in_context():
    assert data_registry() is ScenarioContext.get(ScenarioKeys.DATA_REGISTRY, DataRegistry)
    assert api_clients() is ScenarioContext.get(ScenarioKeys.API_CLIENT_REGISTRY, ApiClientRegistry)
    assert data_registry() is data_registry()

"""create_store, snapshot_domains and recreate_store."""

from __future__ import annotations

import pytest

from observact.core.errors import UnknownMiddlewareError
from observact.core.models import Domain, StoreDefinition
from observact.middlewares import create_middleware, logger_middleware
from observact.store import (
    Store,
    ThreadSafeStore,
    create_store,
    recreate_store,
    snapshot_domains,
)


class TestCreateStore:
    def test_from_domains(self, theme_domain):
        store = create_store(domains=[theme_domain])
        assert isinstance(store, Store)
        assert store.get("theme") == "light"

    def test_empty(self):
        store = create_store()
        assert store.get_domain_keys() == []

    def test_from_definition_resolves_builtins(self, sample_domains):
        definition = StoreDefinition(domains=sample_domains, middlewares=["logstore"])
        store = create_store(definition, name="app")
        assert store.name == "app"
        assert store.get_domain_keys() == ["cart", "theme"]
        assert store.middlewares == (logger_middleware,)

    def test_definition_unknown_middleware(self, sample_domains):
        definition = StoreDefinition(domains=sample_domains, middlewares=["missing"])
        with pytest.raises(UnknownMiddlewareError):
            create_store(definition)

    def test_explicit_middlewares_run_after_definition_ones(self, sample_domains):
        custom = create_middleware(lambda ctx: None, "custom")
        definition = StoreDefinition(domains=sample_domains, middlewares=["logstore"])
        store = create_store(definition, middlewares=[custom])
        assert [m.name for m in store.middlewares] == ["logstore", "custom"]

    def test_explicit_domains_replace_definition_domains(self, sample_domains):
        definition = StoreDefinition(domains=sample_domains)
        store = create_store(definition, domains=[{"key": "only", "value": 1}])
        assert store.get_domain_keys() == ["only"]


class TestSnapshot:
    def test_snapshot_reflects_current_values(self, multi_store):
        multi_store.set("theme", "dark")
        snap = snapshot_domains(multi_store)
        assert [d.key for d in snap] == ["theme", "shopping-cart", "profile"]
        assert snap[0] == Domain(key="theme", value="dark")

    def test_snapshot_of_threadsafe_store(self, theme_store):
        snap = snapshot_domains(ThreadSafeStore(theme_store))
        assert snap == [Domain(key="theme", value="light")]


class TestRecreateStore:
    def test_carries_values_not_observers(self, sample_domains):
        calls = []
        store = Store(sample_domains, name="ui")
        store.observe("theme", calls.append)
        store.set("theme", "dark")

        fresh = recreate_store(store)
        fresh.set("theme", "shade")

        assert fresh is not store
        assert fresh.name == "ui"
        assert fresh.get("theme") == "shade"
        assert store.get("theme") == "dark"
        assert calls == ["dark"]

    def test_keeps_reserved_flags(self, sample_domains):
        fresh = recreate_store(Store(sample_domains))
        assert fresh.domains[0].persist is True
        assert fresh.get_domain_keys() == ["cart", "theme"]

    def test_keeps_middlewares_by_default(self, theme_domain):
        store = Store([theme_domain], middlewares=[logger_middleware])
        assert recreate_store(store).middlewares == (logger_middleware,)

    def test_middleware_override(self, theme_domain):
        store = Store([theme_domain], middlewares=[logger_middleware])
        assert recreate_store(store, middlewares=[]).middlewares == ()

    def test_from_threadsafe_store_keeps_configuration(self, sample_domains):
        store = Store(sample_domains, middlewares=[logger_middleware], name="ui")
        safe = ThreadSafeStore(store)
        safe.set("theme", "dark")

        fresh = recreate_store(safe)

        assert isinstance(fresh, Store)
        assert fresh.get("theme") == "dark"
        assert fresh.name == "ui"
        assert fresh.middlewares == (logger_middleware,)
        assert fresh.domains[0].persist is True

    def test_from_protocol_only_store(self):
        class DictStore:
            def __init__(self):
                self._values = {"theme": "dark"}

            def get(self, key):
                return self._values[key]

            def set(self, key, value):
                self._values[key] = value

            def observe(self, key, handler):
                pass

            def clear_observers(self):
                pass

            def get_domain_keys(self):
                return list(self._values)

        fresh = recreate_store(DictStore())
        assert fresh.get("theme") == "dark"
        assert fresh.name == "store"
        assert fresh.middlewares == ()

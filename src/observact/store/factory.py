"""Store factory functions and snapshot helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from observact.core.interfaces import IObservableStore
from observact.core.models import Domain, Middleware, StoreDefinition
from observact.middlewares import resolve_middlewares

from .store import Store
from .threadsafe import ThreadSafeStore


def create_store(
    definition: StoreDefinition | None = None,
    *,
    domains: Iterable[Domain | Mapping[str, Any]] | None = None,
    middlewares: Sequence[Middleware] | None = None,
    name: str = "store",
) -> Store:
    """Create a store from a definition or from explicit domains.

    When both are given, ``domains`` replaces the definition's domains and
    ``middlewares`` run after the definition's built-in middlewares.
    """
    resolved: list[Middleware] = []
    declared: Iterable[Domain | Mapping[str, Any]] = ()
    if definition is not None:
        declared = definition.domains
        resolved.extend(resolve_middlewares(definition.middlewares))
    if domains is not None:
        declared = domains
    if middlewares:
        resolved.extend(middlewares)
    return Store(declared, middlewares=resolved, name=name)


def snapshot_domains(store: IObservableStore) -> list[Domain]:
    """Current value of every domain, as declarations in declaration order."""
    return [Domain(key=k, value=store.get(k)) for k in store.get_domain_keys()]


def recreate_store(
    store: IObservableStore,
    middlewares: Sequence[Middleware] | None = None,
    name: str | None = None,
) -> Store:
    """Build a fresh store seeded with ``store``'s current values.

    Observers are not carried over. When ``store`` is a ``Store`` (or a
    ``ThreadSafeStore`` around one), its middlewares (unless ``middlewares``
    is given), name and reserved flags are kept.
    """
    values = {d.key: d.value for d in snapshot_domains(store)}
    if isinstance(store, ThreadSafeStore):
        store = store.store
    if isinstance(store, Store):
        domains = [d.model_copy(update={"value": values[d.key]}) for d in store.domains]
        name = name or store.name
        if middlewares is None:
            middlewares = store.middlewares
    else:
        domains = [Domain(key=k, value=v) for k, v in values.items()]
    return Store(domains, middlewares=middlewares, name=name or "store")

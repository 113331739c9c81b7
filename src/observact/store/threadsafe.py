"""Mutual-exclusion wrapper for stores shared across threads."""

from __future__ import annotations

import threading
from typing import Any

from observact.core.models import ObserverHandler

from .store import Store


class ThreadSafeStore:
    """Serializes every public call on a wrapped ``Store``.

    The lock is held for the whole call, so a ``set`` runs its middlewares,
    replaces the value and notifies observers before any other thread can
    read or write. It is an ``RLock``: observers and middlewares may call
    back into the store from the same thread.
    """

    def __init__(self, store: Store) -> None:
        self._store = store
        self._lock = threading.RLock()

    @property
    def store(self) -> Store:
        return self._store

    @property
    def name(self) -> str:
        return self._store.name

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: str) -> Any:
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._store.set(key, value)

    def observe(self, key: str, handler: ObserverHandler) -> None:
        with self._lock:
            self._store.observe(key, handler)

    def clear_observers(self) -> None:
        with self._lock:
            self._store.clear_observers()

    def get_domain_keys(self) -> list[str]:
        with self._lock:
            return self._store.get_domain_keys()

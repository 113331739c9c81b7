"""The observable store and its factories."""

from observact.store.factory import create_store, recreate_store, snapshot_domains
from observact.store.store import Store
from observact.store.threadsafe import ThreadSafeStore

__all__ = [
    "Store",
    "ThreadSafeStore",
    "create_store",
    "recreate_store",
    "snapshot_domains",
]

"""observact: an in-process observable key-value store.

Declare domains once, read and write them through ``get``/``set``, react to
writes with ``observe``, and intercept writes with middlewares.
"""

from observact.core.errors import (
    ConfigError,
    DomainNotFound,
    DuplicateDomainError,
    ObservactError,
    StoreError,
    UnknownMiddlewareError,
)
from observact.core.interfaces import IObservableStore
from observact.core.models import (
    Domain,
    Middleware,
    MiddlewareContext,
    Mutation,
    StoreDefinition,
)
from observact.middlewares import create_middleware, logger_middleware
from observact.store import (
    Store,
    ThreadSafeStore,
    create_store,
    recreate_store,
    snapshot_domains,
)

__all__ = [
    # factory functions
    "create_store",
    "create_middleware",
    "recreate_store",
    "snapshot_domains",
    # built-in middlewares
    "logger_middleware",
    # types
    "Domain",
    "IObservableStore",
    "Middleware",
    "MiddlewareContext",
    "Mutation",
    "Store",
    "StoreDefinition",
    "ThreadSafeStore",
    # errors
    "ConfigError",
    "DomainNotFound",
    "DuplicateDomainError",
    "ObservactError",
    "StoreError",
    "UnknownMiddlewareError",
]

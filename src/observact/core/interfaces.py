"""Protocol interfaces for observact.

The store handle is the only boundary collaborators depend on: framework
bindings, middlewares and the CLI all talk to a store through it.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .models import ObserverHandler


@runtime_checkable
class IObservableStore(Protocol):
    """Read/write/observe protocol over a fixed set of domains."""

    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def observe(self, key: str, handler: ObserverHandler) -> None: ...

    def clear_observers(self) -> None: ...

    def get_domain_keys(self) -> list[str]: ...

"""Observable key-value store over a fixed set of domains.

Writes run synchronously on the caller's thread: every middleware in
registration order, then the value replacement, then every observer of the
written key in registration order. Nothing is deferred or scheduled.

Existence policy is strict: ``get``, ``set`` and ``observe`` all raise
``DomainNotFound`` for a key that was not declared at construction.

Failures are not isolated. A middleware that raises aborts the write before
the value is replaced; an observer that raises propagates to the caller of
``set`` and the observers registered after it are not called for that write.

Middlewares and observers may call ``set`` on the same store. That recursion
goes through the same protocol and is not bounded here; an observer that
always writes back to the key it observes recurses until Python's recursion
limit is hit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from observact.core.errors import ConfigError, DomainNotFound, DuplicateDomainError
from observact.core.models import (
    Domain,
    Middleware,
    MiddlewareContext,
    Mutation,
    ObserverEntry,
    ObserverHandler,
)
from observact.observability.logger import bind_store

logger = logging.getLogger(__name__)


def _as_domains(domains: Iterable[Domain | Mapping[str, Any]]) -> tuple[Domain, ...]:
    parsed: list[Domain] = []
    seen: set[str] = set()
    for d in domains:
        try:
            domain = d if isinstance(d, Domain) else Domain.model_validate(d)
        except ValidationError as exc:
            raise ConfigError(f"invalid domain declaration {d!r}: {exc}") from exc
        if domain.key in seen:
            raise DuplicateDomainError(domain.key)
        seen.add(domain.key)
        parsed.append(domain)
    return tuple(parsed)


class Store:
    """Global store for all states across domains.

    Domain declarations and middlewares are fixed once built; only domain
    values change, and only through ``set``.
    """

    def __init__(
        self,
        domains: Iterable[Domain | Mapping[str, Any]],
        middlewares: Sequence[Middleware] | None = None,
        name: str = "store",
    ) -> None:
        self._name = name
        self._domains = _as_domains(domains)
        # key -> current value; insertion order is declaration order
        self._values: dict[str, Any] = {d.key: d.value for d in self._domains}
        self._middlewares: tuple[Middleware, ...] = tuple(middlewares or ())
        self._observers: list[ObserverEntry] = []

        logger.debug(
            "Store %s created: domains=%s middlewares=%s",
            name,
            list(self._values),
            [m.name for m in self._middlewares],
        )

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        """Registered middlewares, in run order."""
        return self._middlewares

    @property
    def domains(self) -> tuple[Domain, ...]:
        """Domain declarations as given at construction (initial values)."""
        return self._domains

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Store(name={self._name!r}, domains={list(self._values)!r})"

    def _require(self, key: str) -> None:
        if key not in self._values:
            raise DomainNotFound(key)

    # ------------------------------------------------------------------
    # Protocol
    # ------------------------------------------------------------------

    def get(self, key: str) -> Any:
        """Return the current value of a domain."""
        self._require(key)
        return self._values[key]

    def set(self, key: str, value: Any) -> None:
        """Replace the value of a domain and notify its observers."""
        self._require(key)

        if self._middlewares:
            context = MiddlewareContext(
                store=self,
                incoming_mutation=Mutation(key=key, value=value),
            )
            with bind_store(self._name):
                for middleware in self._middlewares:
                    middleware.exec(context)

        self._values[key] = value

        # Observers added or cleared during dispatch apply from the next write.
        for entry in tuple(self._observers):
            if entry.key == key:
                entry.handler(value)

    def observe(self, key: str, handler: ObserverHandler) -> None:
        """Register a handler called with the new value on every ``set(key)``."""
        self._require(key)
        self._observers.append(ObserverEntry(key=key, handler=handler))

    def clear_observers(self) -> None:
        """Unregister every observer. Middlewares and values are untouched."""
        self._observers = []

    def get_domain_keys(self) -> list[str]:
        """Declared keys in declaration order."""
        return [d.key for d in self._domains]

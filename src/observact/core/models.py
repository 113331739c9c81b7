"""Data models for domains, observers and middlewares."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .interfaces import IObservableStore


ObserverHandler = Callable[[Any], None]


# ---------------------------------------------------------------------------
# Declarations
# ---------------------------------------------------------------------------

class Domain(BaseModel):
    """A named slot of application state and its initial value.

    ``persist`` and ``react_only_on_change`` are reserved flags: they are
    accepted and kept on the declaration but the store does not act on them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key: str
    value: Any
    persist: bool = False
    react_only_on_change: bool = Field(default=False, alias="reactOnlyOnChange")


class StoreDefinition(BaseModel):
    """Declarative store input, as loaded from a TOML file."""

    domains: list[Domain] = Field(default_factory=list)
    middlewares: list[str] = Field(default_factory=list)  # built-in names


# ---------------------------------------------------------------------------
# Runtime records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ObserverEntry:
    key: str
    handler: ObserverHandler


@dataclass(frozen=True)
class Mutation:
    """A pending write, as seen by middlewares."""

    key: str
    value: Any


@dataclass(frozen=True)
class MiddlewareContext:
    store: IObservableStore
    incoming_mutation: Mutation


MiddlewareHandler = Callable[[MiddlewareContext], Any]


@dataclass(frozen=True)
class Middleware:
    """Named hook run on every write, before the value is replaced."""

    name: str
    exec: Callable[[MiddlewareContext], None]

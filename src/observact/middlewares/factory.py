"""Middleware construction."""

from __future__ import annotations

from observact.core.models import Middleware, MiddlewareContext, MiddlewareHandler


def create_middleware(fn: MiddlewareHandler, name: str) -> Middleware:
    """Wrap a handler into a store middleware.

    Args:
        fn: Called with a ``MiddlewareContext`` on every write. Its return
            value is discarded; it cannot veto or rewrite the mutation.
        name: Display name. Not required to be unique.
    """

    def _exec(context: MiddlewareContext) -> None:
        fn(context)

    return Middleware(name=name, exec=_exec)

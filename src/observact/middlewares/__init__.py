"""Store middlewares: the factory, built-ins, and lookup by name."""

from __future__ import annotations

from collections.abc import Iterable

from observact.core.errors import UnknownMiddlewareError
from observact.core.models import Middleware
from observact.middlewares.factory import create_middleware
from observact.middlewares.logger import logger_middleware

BUILTIN_MIDDLEWARES: dict[str, Middleware] = {
    logger_middleware.name: logger_middleware,
}


def resolve_middlewares(names: Iterable[str]) -> list[Middleware]:
    """Map built-in middleware names to middlewares, keeping order."""
    resolved: list[Middleware] = []
    for name in names:
        middleware = BUILTIN_MIDDLEWARES.get(name)
        if middleware is None:
            raise UnknownMiddlewareError(name)
        resolved.append(middleware)
    return resolved


__all__ = [
    "BUILTIN_MIDDLEWARES",
    "create_middleware",
    "logger_middleware",
    "resolve_middlewares",
]

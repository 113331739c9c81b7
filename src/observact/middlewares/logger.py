"""Built-in middleware that logs every mutation."""

from __future__ import annotations

from observact.core.models import MiddlewareContext
from observact.middlewares.factory import create_middleware
from observact.observability.logger import get_logger


def _log_mutation(context: MiddlewareContext) -> None:
    key = context.incoming_mutation.key
    # Runs before the write, so this is still the pre-mutation value.
    current = context.store.get(key)
    get_logger(__name__).info(
        "store.mutation",
        domain=key,
        current=current,
        incoming=context.incoming_mutation.value,
    )


logger_middleware = create_middleware(_log_mutation, "logstore")

"""Structured logging with store-name binding.

Uses structlog for structured logging with JSON or console output.
Entries emitted from inside a ``bind_store`` block carry the store name.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog


def _add_component(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: tag every entry with the library name."""
    event_dict.setdefault("component", "observact")
    return event_dict


def setup_logging(
    level: str = "INFO",
    format: str = "console",
) -> None:
    """Route store diagnostics and mutation logs through structlog.

    The ``logstore`` middleware and the CLI both log through this setup;
    entries go to stderr so CLI output on stdout stays parseable JSON.

    Args:
        level: Threshold name; ``DEBUG`` also shows store construction.
        format: "json" renders one object per entry, "console" is coloured
            key=value output for interactive use.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        _add_component,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )


@contextmanager
def bind_store(name: str) -> Iterator[None]:
    """Attach ``store=<name>`` to every structlog entry inside the block."""
    with structlog.contextvars.bound_contextvars(store=name):
        yield


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)

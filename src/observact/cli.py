"""CLI entry point for inspecting and mutating a store definition."""

from __future__ import annotations

import json
from typing import Any

import click

from .core.config import load_definition, load_settings
from .core.errors import ObservactError
from .observability.logger import setup_logging
from .store import Store, ThreadSafeStore, create_store


def _parse_value(raw: str) -> Any:
    """JSON value if it parses, otherwise the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _dump(value: Any) -> str:
    return json.dumps(value, default=str)


def _build(ctx: click.Context, definition_path: str) -> Store | ThreadSafeStore:
    settings = ctx.obj["settings"]
    try:
        store = create_store(load_definition(definition_path), name=settings.store_name)
    except ObservactError as exc:
        raise click.ClickException(str(exc)) from exc
    return ThreadSafeStore(store) if settings.thread_safe else store


@click.group()
@click.option("--config", default=None, help="Settings TOML file")
@click.option("--log-level", default=None, help="Override log level")
@click.option("--log-format", type=click.Choice(["json", "console"]), default=None)
@click.pass_context
def main(ctx: click.Context, config: str | None, log_level: str | None, log_format: str | None) -> None:
    """Observable key-value store."""
    overrides: dict = {}
    if log_level:
        overrides["log_level"] = log_level
    if log_format:
        overrides["log_format"] = log_format

    settings = load_settings(config_path=config, overrides=overrides)
    setup_logging(level=settings.log_level, format=settings.log_format)
    ctx.ensure_object(dict)["settings"] = settings


@main.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def keys(ctx: click.Context, definition: str) -> None:
    """List declared domain keys."""
    store = _build(ctx, definition)
    for key in store.get_domain_keys():
        click.echo(key)


@main.command()
@click.argument("definition", type=click.Path(exists=True, dir_okay=False))
@click.argument("key")
@click.pass_context
def get(ctx: click.Context, definition: str, key: str) -> None:
    """Print the initial value of KEY as JSON."""
    store = _build(ctx, definition)
    try:
        click.echo(_dump(store.get(key)))
    except ObservactError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command(name="set")
@click.argument("definition", type=click.Path(exists=True, dir_okay=False))
@click.argument("assignments", nargs=-1, required=True)
@click.pass_context
def set_(ctx: click.Context, definition: str, assignments: tuple[str, ...]) -> None:
    """Apply KEY=VALUE writes in order and print the resulting domains.

    VALUE is parsed as JSON, falling back to the raw string.
    """
    store = _build(ctx, definition)
    for assignment in assignments:
        key, sep, raw = assignment.partition("=")
        if not sep:
            raise click.BadParameter(
                f"expected KEY=VALUE, got {assignment!r}", param_hint="ASSIGNMENTS"
            )
        try:
            store.set(key, _parse_value(raw))
        except ObservactError as exc:
            raise click.ClickException(str(exc)) from exc

    state = {k: store.get(k) for k in store.get_domain_keys()}
    click.echo(_dump(state))

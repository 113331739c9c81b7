"""Configuration management.

Settings load from an optional TOML file plus environment variables
(pydantic-settings). Store definitions load from TOML into
``StoreDefinition``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import tomli
from pydantic import ValidationError
from pydantic_settings import BaseSettings

from .errors import ConfigError
from .models import StoreDefinition


class Settings(BaseSettings):
    """Runtime settings for the CLI and embedding applications."""

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"
    store_name: str = "store"
    thread_safe: bool = False  # Wrap created stores in ThreadSafeStore

    model_config = {"env_prefix": "OBSERVACT_", "env_nested_delimiter": "__"}


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomli.load(f)
    except tomli.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML: {exc}") from exc


def load_settings(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Load settings from TOML file + env vars.

    Args:
        config_path: Path to TOML config file (optional, skipped if missing).
        overrides: Dict of overrides to apply on top.
    """
    data: dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            data = _read_toml(path)

    if overrides:
        data.update(overrides)

    return Settings(**data)


def load_definition(path: str | Path) -> StoreDefinition:
    """Load a store definition (domains + built-in middleware names)."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"store definition not found: {path}")
    data = _read_toml(path)
    try:
        return StoreDefinition.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{path}: invalid store definition: {exc}") from exc

"""Shared fixtures for the observact test suite."""

from __future__ import annotations

import pytest

from observact.core.models import Domain
from observact.store import Store


# ---------------------------------------------------------------------------
# Domains
# ---------------------------------------------------------------------------

@pytest.fixture
def theme_domain() -> dict:
    return {"key": "theme", "value": "light"}


@pytest.fixture
def profile_value() -> dict:
    return {
        "firstName": "Observee",
        "lastName": "Acticia",
        "email": "observee@acticia.doesnot.exist",
    }


@pytest.fixture
def multiple_domains(theme_domain, profile_value) -> list[dict]:
    return [
        dict(theme_domain),
        {"key": "shopping-cart", "value": []},
        {"key": "profile", "value": profile_value},
    ]


@pytest.fixture
def theme_store(theme_domain) -> Store:
    return Store([theme_domain])


@pytest.fixture
def multi_store(multiple_domains) -> Store:
    return Store(multiple_domains)


@pytest.fixture
def definition_file(tmp_path):
    """Write a TOML store definition and return its path."""

    def _write(body: str):
        path = tmp_path / "store.toml"
        path.write_text(body)
        return path

    return _write


@pytest.fixture
def sample_domains() -> list[Domain]:
    return [
        Domain(key="cart", value=[], persist=True),
        Domain(key="theme", value="light"),
    ]

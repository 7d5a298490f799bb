"""
Shared test fixtures.
"""

import importlib
import sys
from pathlib import Path

import pytest
from jinja2 import Environment

from cdn_images import jinja_filters

BASE_URL = "https://cdn.example.com/blog/"


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def env(base_url: str) -> Environment:
    """A Jinja2 environment wired the way Pelican applies JINJA_FILTERS."""
    environment = Environment()
    environment.filters.update(jinja_filters(base_url))
    return environment


@pytest.fixture
def load_settings(monkeypatch: pytest.MonkeyPatch):
    """Import a settings module fresh, after env vars have been patched."""

    def _load(name: str):
        for module in ("pelicanconf", "publishconf"):
            monkeypatch.delitem(sys.modules, module, raising=False)
        return importlib.import_module(name)

    yield _load

    for module in ("pelicanconf", "publishconf"):
        sys.modules.pop(module, None)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent

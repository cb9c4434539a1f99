"""Shared pytest fixtures for all tests."""

from pathlib import Path

import pytest

from file2ddl.analysis.typing import dialects
from file2ddl.analysis.typing.catalog import TypeCatalog
from file2ddl.core.config import get_settings
from file2ddl.core.logging import configure_logging

TESTDATA_DIR = Path(__file__).parent / "testdata"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Fresh settings and dialect registry for every test."""
    for name in ("FILE2DDL_DEFAULT_DIALECT", "FILE2DDL_DEFAULT_QUOTE_MODE", "FILE2DDL_DIALECTS_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(dialects, "_registered", {})
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Rebind structlog to the real stderr after each test.

    CLI commands configure logging against the runner's captured stream,
    which is closed once the invocation returns.
    """
    yield
    configure_logging()


@pytest.fixture
def testdata_dir() -> Path:
    """Directory holding the sample files."""
    return TESTDATA_DIR


@pytest.fixture
def postgresql() -> TypeCatalog:
    """The built-in PostgreSQL catalog."""
    return dialects.get_catalog("postgresql")

"""Shared fixtures for the sql_formatter test suite."""

import pytest

from sql_formatter.config.settings import get_settings
from sql_formatter.dialects.registry import get_dialect, registry

_SETTINGS_ENV_VARS = (
    "LOG_LEVEL",
    "SQLFMT_DEFAULT_LANGUAGE",
    "SQLFMT_DEFAULT_INDENT",
    "SQLFMT_DEFAULT_RESERVED_WORD_CASE",
    "SQLFMT_DIALECTS_DIR",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Run every test with default settings and a freshly loaded registry."""
    for var in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    # Keep a developer's .env out of the settings
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    registry.reset()
    yield
    get_settings.cache_clear()
    registry.reset()


@pytest.fixture
def sql_profile():
    return get_dialect("sql")


@pytest.fixture
def db2_profile():
    return get_dialect("db2")


@pytest.fixture
def n1ql_profile():
    return get_dialect("n1ql")


@pytest.fixture
def plsql_profile():
    return get_dialect("pl/sql")

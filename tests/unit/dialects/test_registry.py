"""
Unit tests for the dialect registry.
"""

import pytest

from sql_formatter.dialects.profile import DialectProfile
from sql_formatter.dialects.registry import (
    DialectRegistry,
    available_dialects,
    get_dialect,
    register_dialect,
    registry,
)
from sql_formatter.errors import UnsupportedDialectError


class TestDialectLookup:
    """Resolving names and aliases."""

    @pytest.mark.unit
    def test_bundled_dialects(self):
        assert available_dialects() == ["db2", "n1ql", "pl/sql", "sql"]

    @pytest.mark.unit
    def test_none_selects_standard_sql(self):
        assert get_dialect(None).name == "sql"

    @pytest.mark.unit
    @pytest.mark.parametrize("language", ["pl/sql", "plsql", "Oracle", " PLSQL "])
    def test_aliases_and_normalization(self, language):
        assert get_dialect(language).name == "pl/sql"

    @pytest.mark.unit
    def test_profiles_are_shared(self):
        assert get_dialect("db2") is get_dialect("DB2")

    @pytest.mark.unit
    def test_unknown_dialect(self):
        with pytest.raises(UnsupportedDialectError, match="Unsupported SQL dialect: blah") as exc:
            get_dialect("blah")
        assert exc.value.language == "blah"

    @pytest.mark.unit
    def test_non_string_language(self):
        with pytest.raises(UnsupportedDialectError):
            get_dialect(42)


class TestRegistration:
    """Runtime registration of custom profiles."""

    @pytest.mark.unit
    def test_register_custom_dialect(self):
        register_dialect(DialectProfile(name="Mini"), aliases=["tiny"])
        assert get_dialect("mini").name == "Mini"
        assert get_dialect("tiny").name == "Mini"
        assert "mini" in available_dialects()

    @pytest.mark.unit
    def test_runtime_registration_wins_over_bundled(self):
        custom = DialectProfile(name="db2")
        register_dialect(custom)
        assert get_dialect("db2") is custom

    @pytest.mark.unit
    def test_reset_reloads_bundled(self):
        register_dialect(DialectProfile(name="mini"))
        registry.reset()
        assert "mini" not in available_dialects()
        assert "sql" in available_dialects()

    @pytest.mark.unit
    def test_separate_registries_are_independent(self):
        local = DialectRegistry()
        local.register(DialectProfile(name="only"))
        assert "only" in local.names()
        assert "only" not in available_dialects()

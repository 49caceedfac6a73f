"""
Unit tests for the command-line entry point.
"""

import io
import json

import pytest

from sql_formatter.cli.__main__ import main, parse_params
from sql_formatter.config.settings import get_settings
from sql_formatter.errors import SqlFormatterConfigError


@pytest.fixture
def stdin(monkeypatch):
    def _set(text):
        monkeypatch.setattr("sys.stdin", io.StringIO(text))

    return _set


class TestFormatCommand:
    """Formatting from stdin and files."""

    @pytest.mark.unit
    def test_formats_stdin(self, stdin, capsys):
        stdin("select a from t")

        assert main(["--uppercase"]) == 0
        assert capsys.readouterr().out == "SELECT\n  a\nFROM\n  t\n"

    @pytest.mark.unit
    def test_formats_file(self, tmp_path, capsys):
        path = tmp_path / "query.sql"
        path.write_text("SELECT col#1 FROM tbl", encoding="utf-8")

        assert main([str(path), "--language", "db2", "--indent", "    "]) == 0
        assert capsys.readouterr().out == "SELECT\n    col#1\nFROM\n    tbl\n"

    @pytest.mark.unit
    def test_writes_output_file(self, stdin, tmp_path, capsys):
        stdin("SELECT 1")
        output = tmp_path / "out.sql"

        assert main(["--output", str(output)]) == 0
        assert output.read_text(encoding="utf-8") == "SELECT\n  1\n"
        assert capsys.readouterr().out == ""

    @pytest.mark.unit
    def test_params(self, stdin, capsys):
        stdin("SELECT :id, :name")

        assert main(["-p", "id=42", "--param", "name='bob'"]) == 0
        assert capsys.readouterr().out == "SELECT\n  42,\n  'bob'\n"

    @pytest.mark.unit
    def test_lowercase_and_lines_between_queries(self, stdin, capsys):
        stdin("SELECT 1; SELECT 2")

        assert main(["--lowercase", "--lines-between-queries", "2"]) == 0
        assert capsys.readouterr().out == "select\n  1;\n\nselect\n  2\n"

    @pytest.mark.unit
    def test_default_language_from_settings(self, stdin, capsys, monkeypatch):
        monkeypatch.setenv("SQLFMT_DEFAULT_LANGUAGE", "db2")
        get_settings.cache_clear()
        stdin("SELECT x # y")

        assert main([]) == 0
        # '#' is a word character in Db2, not a comment
        assert capsys.readouterr().out == "SELECT\n  x # y\n"


class TestTokensCommand:
    """The --tokens dump."""

    @pytest.mark.unit
    def test_prints_json_lines(self, stdin, capsys):
        stdin("SELECT :v")

        assert main(["--tokens", "--language", "db2"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line) for line in lines] == [
            {"type": "reserved-toplevel", "value": "SELECT"},
            {"type": "whitespace", "value": " "},
            {"type": "placeholder", "value": ":v", "key": "v"},
        ]


class TestErrors:
    """Configuration errors exit with status 2."""

    @pytest.mark.unit
    def test_unknown_language(self, stdin, capsys):
        stdin("SELECT 1")

        assert main(["--language", "blah"]) == 2
        captured = capsys.readouterr()
        assert "Unsupported SQL dialect: blah" in captured.err
        assert captured.out == ""

    @pytest.mark.unit
    def test_malformed_param(self, stdin, capsys):
        stdin("SELECT :id")

        assert main(["--param", "id"]) == 2
        assert "KEY=VALUE" in capsys.readouterr().err

    @pytest.mark.unit
    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.sql")]) == 1
        assert "Error" in capsys.readouterr().err

    @pytest.mark.unit
    def test_conflicting_case_flags(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--uppercase", "--lowercase"])
        assert exc.value.code == 2


class TestMisc:
    """Listing dialects and parsing params."""

    @pytest.mark.unit
    def test_list_dialects(self, capsys):
        assert main(["--list-dialects"]) == 0
        assert capsys.readouterr().out.split() == ["db2", "n1ql", "pl/sql", "sql"]

    @pytest.mark.unit
    def test_parse_params_keeps_extra_equals(self):
        assert parse_params(["expr=a=b", "empty="]) == {"expr": "a=b", "empty": ""}

    @pytest.mark.unit
    def test_parse_params_rejects_missing_separator(self):
        with pytest.raises(SqlFormatterConfigError):
            parse_params(["oops"])

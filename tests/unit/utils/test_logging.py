"""Unit tests for structured logging.

Tests cover:
- get_logger returns a structlog BoundLogger
- JSON rendering with ISO timestamps and logger names
- Sanitization of sensitive fields
- Context binding
- Debug events emitted by the formatter
"""

import json
import logging

import pytest

from sql_formatter.core.formatter import Formatter
from sql_formatter.core.tokenizer import Tokenizer
from sql_formatter.core.types import FormatOptions
from sql_formatter.utils.logging import (
    bind_context,
    get_logger,
    sanitization_processor,
    sanitize_for_logging,
)


@pytest.mark.unit
def test_get_logger_returns_bound_logger() -> None:
    """Verify get_logger returns a structlog BoundLogger."""
    logger = get_logger("test_module")

    assert hasattr(logger, "bind")
    assert hasattr(logger, "debug")
    assert hasattr(logger, "warning")


@pytest.mark.unit
def test_log_records_are_json(caplog: pytest.LogCaptureFixture) -> None:
    """Verify events are rendered as JSON with name, level and timestamp."""
    caplog.set_level(logging.INFO)

    logger = get_logger("my_test_logger")
    logger.info("test_event", dialect="db2")

    log_data = json.loads(caplog.records[-1].message)
    assert log_data["event"] == "test_event"
    assert log_data["logger"] == "my_test_logger"
    assert log_data["level"] == "info"
    assert log_data["dialect"] == "db2"
    assert "T" in log_data["timestamp"]


@pytest.mark.unit
def test_sanitize_for_logging_case_insensitive() -> None:
    """Verify sanitization is case-insensitive."""
    data = {"PASSWORD": "secret123", "Token": "abc123", "API_KEY": "key_123"}
    sanitized = sanitize_for_logging(data)

    assert sanitized == {
        "PASSWORD": "[REDACTED]",
        "Token": "[REDACTED]",
        "API_KEY": "[REDACTED]",
    }


@pytest.mark.unit
def test_sanitize_for_logging_handles_nested_dicts() -> None:
    """Verify nested dictionaries are sanitized."""
    data = {"dialect": "sql", "options": {"api_key": "k-123", "indent": "  "}}
    sanitized = sanitize_for_logging(data)

    assert sanitized["options"]["api_key"] == "[REDACTED]"
    assert sanitized["options"]["indent"] == "  "


@pytest.mark.unit
def test_sanitization_processor_keeps_structural_keys() -> None:
    """The event name is never redacted even if it looks sensitive."""
    event_dict = {"event": "token_refreshed", "level": "info", "secret": "x"}
    result = sanitization_processor(logging.getLogger("test"), "info", event_dict)

    assert result["event"] == "token_refreshed"
    assert result["secret"] == "[REDACTED]"


@pytest.mark.unit
def test_context_binding_persists(caplog: pytest.LogCaptureFixture) -> None:
    """Verify bound context persists across log statements."""
    caplog.set_level(logging.INFO)

    logger = bind_context("my_test_logger", dialect="n1ql", operation="format")
    logger.info("first_event")
    logger.info("second_event", token_count=3)

    first = json.loads(caplog.records[-2].message)
    second = json.loads(caplog.records[-1].message)
    assert first["dialect"] == "n1ql"
    assert first["logger"] == "my_test_logger"
    assert second["operation"] == "format"
    assert second["token_count"] == 3


@pytest.mark.unit
def test_formatter_emits_debug_event(caplog: pytest.LogCaptureFixture, sql_profile) -> None:
    """The formatter reports a format_completed event at debug level."""
    caplog.set_level(logging.DEBUG, logger="sql_formatter")

    Formatter(sql_profile, FormatOptions(params={"id": 1})).format("SELECT :id")

    events = [json.loads(r.message) for r in caplog.records]
    completed = [e for e in events if e["event"] == "format_completed"]
    assert completed
    assert completed[-1]["dialect"] == "sql"
    assert completed[-1]["logger"] == "sql_formatter.core.formatter"


@pytest.mark.unit
def test_package_logs_are_silent_by_default(caplog: pytest.LogCaptureFixture, sql_profile) -> None:
    """Debug events stay below the default WARNING level."""
    caplog.set_level(logging.DEBUG)

    Formatter(sql_profile).format("SELECT 1")

    assert not [r for r in caplog.records if r.name.startswith("sql_formatter")]


@pytest.mark.unit
def test_tokenizer_logs_under_its_module_name(
    caplog: pytest.LogCaptureFixture, db2_profile
) -> None:
    """The tokenizer's bound logger carries the dialect and module name."""
    caplog.set_level(logging.DEBUG, logger="sql_formatter")

    Tokenizer(db2_profile).tokenize("SELECT 1")

    events = [json.loads(r.message) for r in caplog.records]
    completed = [e for e in events if e["event"] == "tokenize_completed"]
    assert completed[-1]["dialect"] == "db2"
    assert completed[-1]["logger"] == "sql_formatter.core.tokenizer"
    assert completed[-1]["token_count"] == 3

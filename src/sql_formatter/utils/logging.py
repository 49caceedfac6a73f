"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Automatic sanitization of sensitive fields
- Context binding support

Configuration is loaded from sql_formatter.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: WARNING

Usage:
    >>> from sql_formatter.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("format_completed", dialect="db2", token_count=12)
"""

import logging
import os
import re
from typing import Any, Dict, MutableMapping

import structlog
from structlog.types import EventDict, Processor

from sql_formatter.config.settings import get_settings

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"

# Structural fields added by the processors, never redacted
_STRUCTLOG_KEYS = {"event", "level", "logger", "timestamp"}


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Redacts values for keys matching password, token, api_key or secret
    (case-insensitive, substring match).

    Args:
        data: Dictionary that may contain sensitive data

    Returns:
        New dictionary with sensitive values replaced by [REDACTED]

    Example:
        >>> sanitize_for_logging({"api_key": "k-123", "dialect": "db2"})
        {'api_key': '[REDACTED]', 'dialect': 'db2'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that sanitizes sensitive fields in event_dict."""
    sanitized: MutableMapping[str, Any] = {}
    for key, value in event_dict.items():
        if key in _STRUCTLOG_KEYS:
            sanitized[key] = value
        elif any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def _get_log_level() -> int:
    """Get log level from settings, falling back to the raw environment."""
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        # A broken .env must not take logging down with it
        level_name = os.getenv("LOG_LEVEL", "WARNING").upper()

    return getattr(logging, level_name, logging.WARNING)


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering and sanitization.

    Log records go through the "sql_formatter" stdlib logger, so host
    applications keep control over handlers.
    """
    package_logger = logging.getLogger("sql_formatter")
    package_logger.setLevel(_get_log_level())
    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_cli_logging(level: str = "WARNING") -> None:
    """Attach a stderr handler for command-line use."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    package_logger = logging.getLogger("sql_formatter")
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering and sanitization

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("dialect_loaded", dialect="n1ql")
    """
    return structlog.get_logger(name)


def bind_context(name: str, **kwargs: Any) -> Any:
    """Create a named logger with bound context fields.

    Args:
        name: Logger name (typically __name__ of the calling module)
        **kwargs: Context fields to bind (e.g., dialect="db2")

    Returns:
        A BoundLogger with the specified context already bound

    Example:
        >>> logger = bind_context(__name__, dialect="db2", operation="format")
        >>> logger.debug("format_completed", token_count=9)
    """
    return structlog.get_logger(name).bind(**kwargs)

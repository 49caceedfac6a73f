"""Shared utilities for sql_formatter."""

from sql_formatter.utils.logging import bind_context, get_logger, sanitize_for_logging

__all__ = ["get_logger", "bind_context", "sanitize_for_logging"]

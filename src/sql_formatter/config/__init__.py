"""Configuration for sql_formatter.

Usage:
    >>> from sql_formatter.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.default_language)
"""

from sql_formatter.config.settings import Settings, get_settings
from sql_formatter.config.schema import FormatConfig, build_format_config

__all__ = [
    "Settings",
    "get_settings",
    "FormatConfig",
    "build_format_config",
]

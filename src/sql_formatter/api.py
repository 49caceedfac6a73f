"""
Public entry points: format and tokenize SQL by dialect name.

Usage:
    >>> import sql_formatter
    >>> print(sql_formatter.format("SELECT a FROM t", {"language": "db2"}))
    SELECT
      a
    FROM
      t
"""

from typing import Any, List, Mapping, Optional, Union

from sql_formatter.config.schema import FormatConfig, build_format_config
from sql_formatter.core.formatter import Formatter
from sql_formatter.core.tokenizer import Tokenizer
from sql_formatter.core.types import Token
from sql_formatter.dialects.registry import get_dialect

ConfigInput = Optional[Union[FormatConfig, Mapping[str, Any]]]


def format(query: str, cfg: ConfigInput = None, **overrides: Any) -> str:
    """
    Format whitespace in a query to make it easier to read.

    Args:
        query: SQL text
        cfg: FormatConfig or mapping with any of
            language: dialect name ("sql", "db2", "n1ql", "pl/sql"), default standard SQL
            indent: characters used for one indentation level, default two spaces
            reserved_word_case: "upper", "lower" or None (unchanged)
            params: placeholder replacements, mapping or sequence
            lines_between_queries: newlines after each ";", default 1
        **overrides: Individual options taking precedence over cfg

    Returns:
        Formatted query

    Raises:
        UnsupportedDialectError: If the language is not registered
        SqlFormatterConfigError: If any other option is invalid
    """
    config = build_format_config(cfg, **overrides)
    profile = get_dialect(config.language)
    return Formatter(profile, config.to_options()).format(query)


def tokenize(query: str, cfg: ConfigInput = None, **overrides: Any) -> List[Token]:
    """
    Split a query into tokens.

    Args:
        query: SQL text
        cfg: FormatConfig or mapping; only ``language`` is used
        **overrides: Individual options taking precedence over cfg

    Returns:
        Tokens whose values concatenate back to ``query``

    Raises:
        UnsupportedDialectError: If the language is not registered
    """
    config = build_format_config(cfg, **overrides)
    profile = get_dialect(config.language)
    return Tokenizer(profile).tokenize(query)

"""
sql_formatter - Dialect-aware SQL pretty printer.

Tokenizes SQL with per-dialect vocabularies and re-lays it out with
consistent line breaks and indentation. Purely lexical: queries are never
parsed, validated or executed.
"""

__version__ = "0.1.0"

from sql_formatter.api import format, tokenize
from sql_formatter.config.schema import FormatConfig
from sql_formatter.core.formatter import Formatter
from sql_formatter.core.tokenizer import Tokenizer
from sql_formatter.core.types import FormatOptions, Token, TokenType
from sql_formatter.dialects.profile import DialectProfile
from sql_formatter.dialects.registry import available_dialects, get_dialect, register_dialect
from sql_formatter.errors import (
    DialectProfileError,
    SqlFormatterConfigError,
    UnsupportedDialectError,
)

__all__ = [
    "format",
    "tokenize",
    "FormatConfig",
    "FormatOptions",
    "Formatter",
    "Tokenizer",
    "Token",
    "TokenType",
    "DialectProfile",
    "available_dialects",
    "get_dialect",
    "register_dialect",
    "SqlFormatterConfigError",
    "UnsupportedDialectError",
    "DialectProfileError",
]

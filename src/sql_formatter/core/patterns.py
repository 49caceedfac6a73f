"""
Regular expression builders used to compile a dialect profile.

Patterns are applied with ``Pattern.match(text, pos)`` so they are anchored at
the tokenizer cursor, and each exposes the token text as group 1. Builders return None for empty categories so the
corresponding matcher is simply left out.
"""

import re
from typing import Iterable, Optional, Pattern, Sequence

from sql_formatter.errors import DialectProfileError

WHITESPACE_REGEX = re.compile(r"(\s+)")
NUMBER_REGEX = re.compile(r"((-\s*)?[0-9]+(\.[0-9]+)?|0x[0-9a-fA-F]+|0b[01]+)\b")
OPERATOR_REGEX = re.compile(
    r"(!=|<>|==|<=|>=|!<|!>|\|\||::|->>|->|~~\*|~~|!~~\*|!~~|~\*|!~\*|!~|.)",
    re.DOTALL,
)
BLOCK_COMMENT_REGEX = re.compile(r"(/\*.*?(?:\*/|\Z))", re.DOTALL)
TABLE_NAME_REGEX = re.compile(r"([a-z][\w.]*|[\[`][a-z][\w. \-]*[\]`])", re.IGNORECASE)

IDENT_PLACEHOLDER_PATTERN = r"[a-zA-Z0-9._$]+"
INDEXED_PLACEHOLDER_PATTERN = r"[0-9]*"

# Escapes: `` in backticks, ]] in brackets, doubled quote or backslash in quotes.
# A missing closing delimiter extends the string to the end of input.
STRING_PATTERNS = {
    "``": r"((`[^`]*(\Z|`))+)",
    "[]": r"((\[[^\]]*(\Z|\]))(\][^\]]*(\Z|\]))*)",
    '""': r'(("[^"\\]*(?:\\.[^"\\]*)*("|\Z))+)',
    "''": r"(('[^'\\]*(?:\\.[^'\\]*)*('|\Z))+)",
    "N''": r"((N'[^'\\]*(?:\\.[^'\\]*)*('|\Z))+)",
}


def _word_pattern(word: str) -> str:
    return r"\s+".join(re.escape(part) for part in word.split())


def create_line_comment_regex(line_comment_types: Sequence[str]) -> Optional[Pattern]:
    if not line_comment_types:
        return None
    markers = "|".join(re.escape(c) for c in line_comment_types)
    return re.compile(rf"((?:{markers})[^\r\n]*(?:\r\n|\r|\n|\Z))")


def create_reserved_word_regex(reserved_words: Iterable[str]) -> Optional[Pattern]:
    """Whole-word, case-insensitive alternation; longer words are tried first."""
    words = sorted(set(reserved_words), key=len, reverse=True)
    if not words:
        return None
    alternation = "|".join(_word_pattern(w) for w in words)
    return re.compile(rf"({alternation})\b", re.IGNORECASE)


def create_word_regex(special_chars: Sequence[str] = ()) -> Pattern:
    extra = "".join(re.escape(c) for c in special_chars)
    return re.compile(rf"([\w{extra}]+)")


def create_string_pattern(string_types: Sequence[str]) -> str:
    try:
        return "|".join(STRING_PATTERNS[t] for t in string_types)
    except KeyError as e:
        raise DialectProfileError(f"Unknown string type: {e.args[0]}")


def create_string_regex(string_types: Sequence[str]) -> Optional[Pattern]:
    if not string_types:
        return None
    return re.compile(rf"({create_string_pattern(string_types)})", re.DOTALL)


def _escape_paren(paren: str) -> str:
    if len(paren) == 1:
        return re.escape(paren)
    return rf"\b{re.escape(paren)}\b"


def create_paren_regex(parens: Sequence[str]) -> Optional[Pattern]:
    if not parens:
        return None
    alternation = "|".join(_escape_paren(p) for p in parens)
    return re.compile(rf"({alternation})", re.IGNORECASE)


def create_placeholder_regex(types: Sequence[str], pattern: str) -> Optional[Pattern]:
    if not types or not pattern:
        return None
    prefixes = "|".join(re.escape(t) for t in types)
    return re.compile(rf"((?:{prefixes})(?:{pattern}))", re.DOTALL)

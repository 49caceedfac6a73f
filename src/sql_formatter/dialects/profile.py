"""
Dialect profile: the declarative word and symbol lists for one SQL variant.

A profile carries no behaviour. The tokenizer compiles it into matchers and
the formatter stays dialect-agnostic.
"""

from dataclasses import dataclass, fields
from typing import Tuple

from sql_formatter.errors import DialectProfileError

STRING_TYPES = ("``", "[]", '""', "''", "N''")


@dataclass(frozen=True)
class DialectProfile:
    """
    Immutable bundle of vocabularies parameterizing the tokenizer.

    Args:
        name: Dialect identifier, e.g. "sql" or "db2"
        reserved_words: Plain reserved words
        reserved_toplevel_words: Clause introducers that start a new top-level block
        reserved_newline_words: Words placed on a new line without changing depth
        table_name_prefix_words: Words after which a bare identifier is a table name
        string_types: Enabled quote styles, a subset of STRING_TYPES
        open_parens: Opening parens, positionally paired with close_parens
        close_parens: Closing parens
        indexed_placeholder_types: Prefixes of indexed placeholders, like "?"
        named_placeholder_types: Prefixes of named placeholders, like ":" and "@"
        line_comment_types: Line comment markers, like "--" and "#"
        special_word_chars: Extra characters allowed inside words
    """

    name: str
    reserved_words: Tuple[str, ...] = ()
    reserved_toplevel_words: Tuple[str, ...] = ()
    reserved_newline_words: Tuple[str, ...] = ()
    table_name_prefix_words: Tuple[str, ...] = ()
    string_types: Tuple[str, ...] = ()
    open_parens: Tuple[str, ...] = ()
    close_parens: Tuple[str, ...] = ()
    indexed_placeholder_types: Tuple[str, ...] = ()
    named_placeholder_types: Tuple[str, ...] = ()
    line_comment_types: Tuple[str, ...] = ()
    special_word_chars: Tuple[str, ...] = ()

    def __post_init__(self):
        for field in fields(self):
            if field.name == "name":
                continue
            values = tuple(getattr(self, field.name))
            if any(not isinstance(v, str) or not v for v in values):
                raise DialectProfileError(
                    f"Dialect {self.name!r}: {field.name} must contain non-empty strings"
                )
            object.__setattr__(self, field.name, values)

        if len(self.open_parens) != len(self.close_parens):
            raise DialectProfileError(
                f"Dialect {self.name!r}: open_parens and close_parens must be paired "
                f"({len(self.open_parens)} != {len(self.close_parens)})"
            )

        unknown = [t for t in self.string_types if t not in STRING_TYPES]
        if unknown:
            raise DialectProfileError(
                f"Dialect {self.name!r}: unknown string types {unknown}"
            )

        for prefix in self.indexed_placeholder_types + self.named_placeholder_types:
            if len(prefix) != 1:
                raise DialectProfileError(
                    f"Dialect {self.name!r}: placeholder prefix {prefix!r} must be a single character"
                )

        for char in self.special_word_chars:
            if len(char) != 1:
                raise DialectProfileError(
                    f"Dialect {self.name!r}: special word char {char!r} must be a single character"
                )

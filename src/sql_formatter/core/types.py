"""
Core types shared by the tokenizer and the formatter.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Union


class TokenType(str, Enum):
    """Token kinds produced by the tokenizer."""

    WHITESPACE = "whitespace"
    WORD = "word"
    STRING = "string"
    RESERVED = "reserved"
    RESERVED_TOPLEVEL = "reserved-toplevel"
    RESERVED_NEWLINE = "reserved-newline"
    OPERATOR = "operator"
    OPEN_PAREN = "open-paren"
    CLOSE_PAREN = "close-paren"
    LINE_COMMENT = "line-comment"
    BLOCK_COMMENT = "block-comment"
    NUMBER = "number"
    PLACEHOLDER = "placeholder"
    TABLENAME = "tablename"

    def __str__(self) -> str:
        return self.value


RESERVED_TYPES = frozenset(
    {TokenType.RESERVED, TokenType.RESERVED_TOPLEVEL, TokenType.RESERVED_NEWLINE}
)


@dataclass(frozen=True)
class Token:
    """
    A classified, contiguous slice of the input.

    Args:
        type: Token kind
        value: Exact source text of the token
        key: Substitution key, only set for placeholder tokens
    """

    type: TokenType
    value: str
    key: Optional[str] = None

    @property
    def kind(self) -> TokenType:
        return self.type

    @property
    def text(self) -> str:
        return self.value

    def is_reserved(self) -> bool:
        return self.type in RESERVED_TYPES

    def to_dict(self) -> Dict[str, str]:
        """Plain-dict form used by the CLI token dump."""
        data = {"type": self.type.value, "value": self.value}
        if self.key is not None:
            data["key"] = self.key
        return data


ParamValues = Union[Mapping[str, Any], Sequence[Any]]


@dataclass(frozen=True)
class FormatOptions:
    """
    Layout options for a single format call.

    Args:
        indent: String repeated once per indentation level
        reserved_word_case: "upper", "lower" or None to keep the original case
        params: Placeholder replacements, by key or by position
        lines_between_queries: Newlines emitted after each ";"
    """

    indent: str = "  "
    reserved_word_case: Optional[str] = None
    params: Optional[ParamValues] = None
    lines_between_queries: int = 1

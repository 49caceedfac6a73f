"""Core tokenizer and layout engine."""

from .formatter import Formatter
from .tokenizer import Tokenizer
from .types import FormatOptions, Token, TokenType

__all__ = [
    "Formatter",
    "Tokenizer",
    "FormatOptions",
    "Token",
    "TokenType",
]

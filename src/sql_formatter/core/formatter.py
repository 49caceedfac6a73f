"""
Layout engine: turns a token sequence into indented SQL text.

The engine makes one left-to-right pass over the tokens. Original
whitespace is discarded and all spacing is synthesized from the token
kinds: clause keywords start new top-level blocks, boolean connectives and
joins start new lines, long parenthesized blocks are indented, and commas
break lines outside of inline blocks.
"""

import re
from typing import List, Optional, Sequence

from sql_formatter.core.indentation import Indentation
from sql_formatter.core.inline_block import InlineBlock
from sql_formatter.core.params import Params
from sql_formatter.core.tokenizer import Tokenizer
from sql_formatter.core.types import FormatOptions, Token, TokenType
from sql_formatter.dialects.profile import DialectProfile
from sql_formatter.utils.logging import bind_context

_WHITESPACE_RUN = re.compile(r"\s+")
_TRAILING_SPACES = re.compile(r"[ \t]+\Z")
_LIMIT = re.compile(r"LIMIT", re.IGNORECASE)

# Previous tokens after which an opening paren keeps the space before it
_PRESERVE_WHITESPACE_FOR = frozenset(
    {TokenType.WHITESPACE, TokenType.OPEN_PAREN, TokenType.LINE_COMMENT}
)


def trim_spaces_end(text: str) -> str:
    return _TRAILING_SPACES.sub("", text)


def strip_indent(line: str, width: int) -> str:
    """Remove at most width leading spaces or tabs."""
    content = line.lstrip(" \t")
    return line[min(len(line) - len(content), width) :]


class Formatter:
    """
    Formats SQL for one dialect profile.

    Example:
        >>> from sql_formatter.dialects import get_dialect
        >>> print(Formatter(get_dialect("sql")).format("select a, b from t"))
        select
          a,
          b
        from
          t
    """

    def __init__(self, profile: DialectProfile, options: Optional[FormatOptions] = None):
        self.profile = profile
        self.options = options or FormatOptions()
        self.tokenizer = Tokenizer(profile)
        self.logger = bind_context(__name__, dialect=profile.name)

    def tokenize(self, query: str) -> List[Token]:
        return self.tokenizer.tokenize(query)

    def format(self, query: str) -> str:
        """
        Format a SQL string.

        Args:
            query: SQL text

        Returns:
            Formatted SQL without leading or trailing whitespace
        """
        tokens = self.tokenizer.tokenize(query)
        formatted = self.format_tokens(tokens)
        self.logger.debug(
            "format_completed",
            token_count=len(tokens),
            output_length=len(formatted),
        )
        return formatted

    def format_tokens(self, tokens: Sequence[Token]) -> str:
        """Lay out an already tokenized query. Each call starts from fresh state."""
        return Layout(tokens, self.options).render()


class Layout:
    """Mutable state of a single formatting pass."""

    def __init__(self, tokens: Sequence[Token], options: FormatOptions):
        self.tokens = tokens
        self.options = options
        self.indentation = Indentation(options.indent)
        self.inline_block = InlineBlock()
        self.params = Params(options.params)
        self.previous_reserved_word: Optional[Token] = None
        self.index = 0

    def render(self) -> str:
        query = ""
        for index, token in enumerate(self.tokens):
            self.index = index
            query = self.format_token(token, query)
        return query.strip()

    def format_token(self, token: Token, query: str) -> str:
        if token.type == TokenType.WHITESPACE:
            # Spacing is synthesized, original whitespace is dropped
            return query
        if token.type == TokenType.LINE_COMMENT:
            return self.format_line_comment(token, query)
        if token.type == TokenType.BLOCK_COMMENT:
            return self.format_block_comment(token, query)
        if token.type == TokenType.RESERVED_TOPLEVEL:
            self.previous_reserved_word = token
            return self.format_toplevel_reserved_word(token, query)
        if token.type == TokenType.RESERVED_NEWLINE:
            self.previous_reserved_word = token
            return self.format_newline_reserved_word(token, query)
        if token.type == TokenType.RESERVED:
            self.previous_reserved_word = token
            return self.format_with_spaces(token, query)
        if token.type == TokenType.OPEN_PAREN:
            return self.format_opening_paren(token, query)
        if token.type == TokenType.CLOSE_PAREN:
            return self.format_closing_paren(token, query)
        if token.type == TokenType.PLACEHOLDER:
            return self.format_placeholder(token, query)
        if token.value == ",":
            return self.format_comma(token, query)
        if token.value == ":":
            return self.format_with_space_after(token, query)
        if token.value == ".":
            return self.format_without_spaces(token, query)
        if token.value == ";":
            return self.format_query_separator(token, query)
        return self.format_with_spaces(token, query)

    def format_line_comment(self, token: Token, query: str) -> str:
        return self.add_newline(self.add_newline(query) + token.value.rstrip())

    def format_block_comment(self, token: Token, query: str) -> str:
        return self.add_newline(self.add_newline(query) + self.indent_comment(token.value))

    def indent_comment(self, comment: str) -> str:
        """
        Re-indent the continuation lines of a block comment.

        Lines keep their offset relative to the column the comment started at
        in the input, so formatting the output again changes nothing.
        """
        lines = comment.split("\n")
        indent = self.indentation.get_indent()
        column = self.source_column()
        indented = [lines[0].rstrip()] + [
            (indent + strip_indent(line, column)).rstrip() for line in lines[1:]
        ]
        return "\n".join(indented)

    def source_column(self) -> int:
        """Column of the current token in the input text."""
        before = "".join(token.value for token in self.tokens[: self.index])
        return len(before) - (before.rfind("\n") + 1)

    def format_toplevel_reserved_word(self, token: Token, query: str) -> str:
        self.indentation.decrease_toplevel()
        query = self.add_newline(query)
        self.indentation.increase_toplevel()
        query += self.equalize_whitespace(self.token_text(token))
        return self.add_newline(query)

    def format_newline_reserved_word(self, token: Token, query: str) -> str:
        return self.add_newline(query) + self.equalize_whitespace(self.token_text(token)) + " "

    def format_opening_paren(self, token: Token, query: str) -> str:
        previous = self.previous_token()
        if previous is None or previous.type not in _PRESERVE_WHITESPACE_FOR:
            trimmed = trim_spaces_end(query)
            # Keep the indentation of a freshly started line
            if not trimmed.endswith("\n"):
                query = trimmed
        query += self.token_text(token)

        self.inline_block.begin_if_possible(self.tokens, self.index)

        if not self.inline_block.is_active():
            self.indentation.increase_block_level()
            query = self.add_newline(query)
        return query

    def format_closing_paren(self, token: Token, query: str) -> str:
        if self.inline_block.is_active():
            self.inline_block.end()
            return self.format_with_space_after(token, query)
        self.indentation.decrease_block_level()
        return self.format_with_spaces(token, self.add_newline(query))

    def format_placeholder(self, token: Token, query: str) -> str:
        return query + self.params.get(token) + " "

    def format_comma(self, token: Token, query: str) -> str:
        query = self.trim_trailing_whitespace(query) + token.value + " "

        if self.inline_block.is_active():
            return query
        if self.previous_reserved_word is not None and _LIMIT.fullmatch(
            self.previous_reserved_word.value
        ):
            return query
        return self.add_newline(query)

    def format_with_space_after(self, token: Token, query: str) -> str:
        return self.trim_trailing_whitespace(query) + self.token_text(token) + " "

    def format_without_spaces(self, token: Token, query: str) -> str:
        return self.trim_trailing_whitespace(query) + token.value

    def format_with_spaces(self, token: Token, query: str) -> str:
        return query + self.token_text(token) + " "

    def format_query_separator(self, token: Token, query: str) -> str:
        self.indentation.reset()
        return (
            self.trim_trailing_whitespace(query)
            + token.value
            + "\n" * self.options.lines_between_queries
        )

    def add_newline(self, query: str) -> str:
        query = trim_spaces_end(query)
        if not query.endswith("\n"):
            query += "\n"
        return query + self.indentation.get_indent()

    def trim_trailing_whitespace(self, query: str) -> str:
        previous = self.previous_non_whitespace_token()
        if previous is not None and previous.type == TokenType.LINE_COMMENT:
            return query.rstrip() + "\n"
        return query.rstrip()

    def token_text(self, token: Token) -> str:
        """Token text with the configured reserved word case applied."""
        is_word_paren = (
            token.type in (TokenType.OPEN_PAREN, TokenType.CLOSE_PAREN)
            and len(token.value) > 1
        )
        if not (token.is_reserved() or is_word_paren):
            return token.value
        if self.options.reserved_word_case == "upper":
            return token.value.upper()
        if self.options.reserved_word_case == "lower":
            return token.value.lower()
        return token.value

    @staticmethod
    def equalize_whitespace(text: str) -> str:
        return _WHITESPACE_RUN.sub(" ", text)

    def previous_token(self, offset: int = 1) -> Optional[Token]:
        position = self.index - offset
        if position < 0:
            return None
        return self.tokens[position]

    def previous_non_whitespace_token(self) -> Optional[Token]:
        for position in range(self.index - 1, -1, -1):
            if self.tokens[position].type != TokenType.WHITESPACE:
                return self.tokens[position]
        return None

"""
SQL tokenizer.

Compiles a DialectProfile into an ordered chain of matchers and splits SQL
text into typed tokens. Tokenization is total and lossless: every character
ends up in exactly one token and the token values concatenate back to the
input. Unrecognized characters become single-character operator tokens, so
malformed SQL never raises.
"""

from typing import Iterator, List, Optional

from sql_formatter.core import patterns
from sql_formatter.core.matchers import (
    FirstMatch,
    PlaceholderMatcher,
    RegexMatcher,
    ReservedWordMatcher,
    TableNameMatcher,
    TokenMatcher,
    parse_prefixed_key,
    parse_quoted_key,
)
from sql_formatter.core.types import Token, TokenType
from sql_formatter.dialects.profile import DialectProfile
from sql_formatter.utils.logging import bind_context


def _optional(matcher_cls, *args) -> Optional[TokenMatcher]:
    # Patterns are None for empty profile categories
    if any(arg is None for arg in args):
        return None
    return matcher_cls(*args)


class Tokenizer:
    """
    Context-sensitive SQL lexer for one dialect profile.

    Example:
        >>> from sql_formatter.dialects import get_dialect
        >>> tokens = Tokenizer(get_dialect("db2")).tokenize("SELECT 1")
        >>> [(t.type.value, t.value) for t in tokens]
        [('reserved-toplevel', 'SELECT'), ('whitespace', ' '), ('number', '1')]
    """

    def __init__(self, profile: DialectProfile):
        """
        Compile the profile into matchers.

        Args:
            profile: Dialect vocabularies

        Raises:
            DialectProfileError: If the profile declares an unknown string type
        """
        self.profile = profile
        self.matchers: List[TokenMatcher] = self._build_matchers(profile)
        self.logger = bind_context(__name__, dialect=profile.name)

    @staticmethod
    def _build_matchers(profile: DialectProfile) -> List[TokenMatcher]:
        string_pattern = patterns.create_string_pattern(profile.string_types)

        comment = FirstMatch(
            m
            for m in (
                _optional(
                    RegexMatcher,
                    TokenType.LINE_COMMENT,
                    patterns.create_line_comment_regex(profile.line_comment_types),
                ),
                RegexMatcher(TokenType.BLOCK_COMMENT, patterns.BLOCK_COMMENT_REGEX),
            )
            if m is not None
        )

        placeholder = FirstMatch(
            m
            for m in (
                _optional(
                    PlaceholderMatcher,
                    patterns.create_placeholder_regex(
                        profile.named_placeholder_types, patterns.IDENT_PLACEHOLDER_PATTERN
                    ),
                    parse_prefixed_key,
                ),
                _optional(
                    PlaceholderMatcher,
                    patterns.create_placeholder_regex(
                        profile.named_placeholder_types, string_pattern
                    ),
                    parse_quoted_key,
                ),
                _optional(
                    PlaceholderMatcher,
                    patterns.create_placeholder_regex(
                        profile.indexed_placeholder_types,
                        patterns.INDEXED_PLACEHOLDER_PATTERN,
                    ),
                    parse_prefixed_key,
                ),
            )
            if m is not None
        )

        reserved = ReservedWordMatcher(
            m
            for m in (
                _optional(
                    RegexMatcher,
                    TokenType.RESERVED_TOPLEVEL,
                    patterns.create_reserved_word_regex(profile.reserved_toplevel_words),
                ),
                _optional(
                    RegexMatcher,
                    TokenType.RESERVED_NEWLINE,
                    patterns.create_reserved_word_regex(profile.reserved_newline_words),
                ),
                _optional(
                    RegexMatcher,
                    TokenType.RESERVED,
                    patterns.create_reserved_word_regex(profile.reserved_words),
                ),
            )
            if m is not None
        )

        chain = [
            RegexMatcher(TokenType.WHITESPACE, patterns.WHITESPACE_REGEX),
            comment,
            _optional(
                RegexMatcher,
                TokenType.STRING,
                patterns.create_string_regex(profile.string_types),
            ),
            _optional(
                RegexMatcher,
                TokenType.OPEN_PAREN,
                patterns.create_paren_regex(profile.open_parens),
            ),
            _optional(
                RegexMatcher,
                TokenType.CLOSE_PAREN,
                patterns.create_paren_regex(profile.close_parens),
            ),
            placeholder,
            RegexMatcher(TokenType.NUMBER, patterns.NUMBER_REGEX),
            reserved,
            _optional(
                TableNameMatcher,
                patterns.TABLE_NAME_REGEX,
                patterns.create_reserved_word_regex(profile.table_name_prefix_words),
            ),
            RegexMatcher(TokenType.WORD, patterns.create_word_regex(profile.special_word_chars)),
            RegexMatcher(TokenType.OPERATOR, patterns.OPERATOR_REGEX),
        ]
        return [m for m in chain if m is not None]

    def tokenize(self, query: str) -> List[Token]:
        """
        Split a SQL string into tokens.

        Args:
            query: SQL text

        Returns:
            Tokens in input order; their values concatenate to ``query``
        """
        tokens = list(self.iter_tokens(query))
        self.logger.debug(
            "tokenize_completed",
            length=len(query),
            token_count=len(tokens),
        )
        return tokens

    def iter_tokens(self, query: str) -> Iterator[Token]:
        """Lazily yield tokens; every step consumes at least one character."""
        pos = 0
        previous: Optional[Token] = None
        before_previous: Optional[Token] = None
        while pos < len(query):
            token = self.next_token(query, pos, previous, before_previous)
            pos += len(token.value)
            before_previous, previous = previous, token
            yield token

    def next_token(
        self,
        query: str,
        pos: int = 0,
        previous: Optional[Token] = None,
        before_previous: Optional[Token] = None,
    ) -> Token:
        """
        Classify the token starting at ``pos``.

        Args:
            query: Full SQL text
            pos: Cursor position, must be inside ``query``
            previous: Token emitted immediately before the cursor
            before_previous: Token emitted before ``previous``

        Returns:
            The highest-priority token matching at the cursor
        """
        for matcher in self.matchers:
            token = matcher.match(query, pos, previous, before_previous)
            if token is not None:
                return token
        # Unreachable: the operator matcher accepts any single character
        return Token(TokenType.OPERATOR, query[pos])

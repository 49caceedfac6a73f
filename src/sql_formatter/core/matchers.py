"""
Token matchers tried by the tokenizer in priority order.

Each matcher inspects the input at the cursor and returns a Token or None.
The two most recently emitted tokens are passed in explicitly so that
context-sensitive matchers (reserved words, table names) need no state of
their own.
"""

from typing import Callable, Optional, Pattern, Sequence

from sql_formatter.core.types import Token, TokenType


class TokenMatcher:
    """Base class for a single step of the matcher chain."""

    def match(
        self,
        text: str,
        pos: int,
        previous: Optional[Token] = None,
        before_previous: Optional[Token] = None,
    ) -> Optional[Token]:
        raise NotImplementedError


class RegexMatcher(TokenMatcher):
    """Matches a compiled pattern at the cursor and tags it with one token type."""

    def __init__(self, token_type: TokenType, regex: Pattern):
        self.token_type = token_type
        self.regex = regex

    def match_value(self, text: str, pos: int) -> Optional[str]:
        found = self.regex.match(text, pos)
        # An empty match would stall the cursor, treat it as no match
        if found and found.group(1):
            return found.group(1)
        return None

    def match(self, text, pos, previous=None, before_previous=None):
        value = self.match_value(text, pos)
        if value is None:
            return None
        return Token(self.token_type, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.token_type.value})"


class PlaceholderMatcher(RegexMatcher):
    """Placeholder matcher that also derives the substitution key."""

    def __init__(self, regex: Pattern, parse_key: Callable[[str], str]):
        super().__init__(TokenType.PLACEHOLDER, regex)
        self.parse_key = parse_key

    def match(self, text, pos, previous=None, before_previous=None):
        value = self.match_value(text, pos)
        if value is None:
            return None
        return Token(TokenType.PLACEHOLDER, value, key=self.parse_key(value))


class FirstMatch(TokenMatcher):
    """Tries a group of matchers and returns the first hit."""

    def __init__(self, matchers: Sequence[TokenMatcher]):
        self.matchers = list(matchers)

    def match(self, text, pos, previous=None, before_previous=None):
        for matcher in self.matchers:
            token = matcher.match(text, pos, previous, before_previous)
            if token is not None:
                return token
        return None

    def __repr__(self) -> str:
        return f"FirstMatch({self.matchers!r})"


class ReservedWordMatcher(FirstMatch):
    """
    Reserved words, toplevel before newline before plain.

    A word right after "." is never reserved, so in "mytable.from" the
    "from" is left for the word matcher.
    """

    def match(self, text, pos, previous=None, before_previous=None):
        if previous is not None and previous.value == ".":
            return None
        return super().match(text, pos, previous, before_previous)


class TableNameMatcher(RegexMatcher):
    """
    Identifier following a table-name prefix word such as FROM or INTO.

    Fires only when the previous token is blank and the token before it, if
    any, starts with one of the prefix words. The first token of the input is
    never a table name, so "tbl.from" stays a plain word.
    """

    def __init__(self, regex: Pattern, prefix_regex: Pattern):
        super().__init__(TokenType.TABLENAME, regex)
        self.prefix_regex = prefix_regex

    def match(self, text, pos, previous=None, before_previous=None):
        if previous is None or previous.value.strip() != "":
            return None
        if before_previous is not None and not self.prefix_regex.match(before_previous.value):
            return None
        return super().match(text, pos, previous, before_previous)


def parse_prefixed_key(value: str) -> str:
    """Key of ":name" or "?1" style placeholders: everything after the prefix."""
    return value[1:]


def parse_quoted_key(value: str) -> str:
    """Key of @"name" style placeholders, with \\<quote> unescaped."""
    key, quote_char = value[2:-1], value[-1]
    return key.replace("\\" + quote_char, quote_char)

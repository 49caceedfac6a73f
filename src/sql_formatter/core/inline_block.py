"""
Detection of parenthesized blocks short enough to stay on one line.

A block is inline when its closing paren is reached within
INLINE_MAX_LENGTH characters of source text and nothing in between forces a
line break (clause keywords, newline keywords, comments or ";"). Nested
parens inside an inline block are inline too.
"""

from typing import Sequence

from sql_formatter.core.types import Token, TokenType

INLINE_MAX_LENGTH = 50

_FORBIDDEN_TYPES = frozenset(
    {
        TokenType.RESERVED_TOPLEVEL,
        TokenType.RESERVED_NEWLINE,
        TokenType.LINE_COMMENT,
        TokenType.BLOCK_COMMENT,
    }
)


class InlineBlock:
    def __init__(self, max_length: int = INLINE_MAX_LENGTH):
        self.max_length = max_length
        self.level = 0

    def begin_if_possible(self, tokens: Sequence[Token], index: int) -> None:
        """Start or deepen an inline block at the open paren tokens[index]."""
        if self.level == 0 and self.is_inline_block(tokens, index):
            self.level = 1
        elif self.level > 0:
            self.level += 1
        else:
            self.level = 0

    def end(self) -> None:
        self.level -= 1

    def is_active(self) -> bool:
        return self.level > 0

    def is_inline_block(self, tokens: Sequence[Token], index: int) -> bool:
        length = 0
        level = 0

        for token in tokens[index:]:
            length += len(token.value)
            if length > self.max_length:
                return False

            if token.type == TokenType.OPEN_PAREN:
                level += 1
            elif token.type == TokenType.CLOSE_PAREN:
                level -= 1
                if level == 0:
                    return True

            if self._is_forbidden_token(token):
                return False
        return False

    @staticmethod
    def _is_forbidden_token(token: Token) -> bool:
        return token.type in _FORBIDDEN_TYPES or token.value == ";"

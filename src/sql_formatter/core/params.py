"""
Placeholder substitution.
"""

from collections.abc import Mapping, Sequence
from typing import Optional

from sql_formatter.core.types import ParamValues, Token


class Params:
    """
    Resolves placeholder tokens against user supplied values.

    Named and numbered placeholders (":name", "@name", "?1") look up their key;
    a sequence is indexed when the key is numeric. Bare "?" placeholders take
    the next value of a sequence in order. Anything that cannot be resolved
    keeps its original text.
    """

    def __init__(self, params: Optional[ParamValues] = None):
        self.params = params
        self.index = 0

    def get(self, token: Token) -> str:
        if self.params is None:
            return token.value

        if token.key:
            return self._lookup(token.key, token.value)

        if isinstance(self.params, Sequence) and not isinstance(self.params, str):
            position = self.index
            self.index += 1
            if position < len(self.params):
                return str(self.params[position])
        return token.value

    def _lookup(self, key: str, default: str) -> str:
        if isinstance(self.params, Mapping):
            if key in self.params:
                return str(self.params[key])
            return default
        if isinstance(self.params, Sequence) and not isinstance(self.params, str):
            if key.isdigit() and int(key) < len(self.params):
                return str(self.params[int(key)])
        return default

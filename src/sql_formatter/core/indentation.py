"""
Indentation state of the layout engine.

A stack of markers: top-level markers are pushed by clause keywords such as
SELECT and FROM, block-level markers by opening parens. Closing a paren pops
everything up to and including the innermost block-level marker, so a clause
opened inside parens never leaks out of them.
"""

from typing import List

INDENT_TYPE_TOP_LEVEL = "top-level"
INDENT_TYPE_BLOCK_LEVEL = "block-level"


class Indentation:
    def __init__(self, indent: str = "  "):
        self.indent = indent
        self.indent_types: List[str] = []

    @property
    def depth(self) -> int:
        return len(self.indent_types)

    def get_indent(self) -> str:
        return self.indent * len(self.indent_types)

    def increase_toplevel(self) -> None:
        self.indent_types.append(INDENT_TYPE_TOP_LEVEL)

    def increase_block_level(self) -> None:
        self.indent_types.append(INDENT_TYPE_BLOCK_LEVEL)

    def decrease_toplevel(self) -> None:
        """Pop one marker if it is top-level."""
        if self.indent_types and self.indent_types[-1] == INDENT_TYPE_TOP_LEVEL:
            self.indent_types.pop()

    def decrease_block_level(self) -> None:
        """Pop markers until a block-level one has been removed."""
        while self.indent_types:
            if self.indent_types.pop() != INDENT_TYPE_TOP_LEVEL:
                break

    def reset(self) -> None:
        self.indent_types = []

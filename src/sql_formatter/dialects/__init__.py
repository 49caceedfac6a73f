"""
SQL dialect profiles and their lookup by name.

Bundled dialects: sql (standard SQL, the default), db2, n1ql and pl/sql.
"""

from .profile import DialectProfile
from .registry import (
    DEFAULT_DIALECT,
    DialectRegistry,
    available_dialects,
    get_dialect,
    register_dialect,
    registry,
)

__all__ = [
    "DialectProfile",
    "DialectRegistry",
    "DEFAULT_DIALECT",
    "available_dialects",
    "get_dialect",
    "register_dialect",
    "registry",
]

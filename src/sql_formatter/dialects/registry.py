"""
Dialect registry: maps language names to dialect profiles.

Profiles shipped as YAML are loaded lazily on first lookup. Custom profiles
can be registered at runtime. Loaded profiles are immutable and shared
read-only between callers.
"""

import threading
from typing import Dict, Iterable, List, Optional

from sql_formatter.dialects.loader import discover_dialect_files, load_dialect_profile
from sql_formatter.dialects.profile import DialectProfile
from sql_formatter.errors import UnsupportedDialectError
from sql_formatter.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DIALECT = "sql"


def _normalize(language: str) -> str:
    return language.strip().lower()


class DialectRegistry:
    """Name and alias lookup for dialect profiles."""

    def __init__(self):
        self._profiles: Dict[str, DialectProfile] = {}
        self._aliases: Dict[str, str] = {}
        self._loaded = False
        self._lock = threading.Lock()

    def register(self, profile: DialectProfile, aliases: Iterable[str] = ()) -> None:
        """
        Register a profile under its name and optional aliases.

        Args:
            profile: Dialect profile to register
            aliases: Alternative names resolving to the same profile
        """
        name = _normalize(profile.name)
        aliases = list(aliases)
        if name in self._profiles:
            logger.warning("dialect_overridden", dialect=name)
        self._profiles[name] = profile
        for alias in aliases:
            self._aliases[_normalize(alias)] = name
        logger.debug("dialect_registered", dialect=name, aliases=aliases)

    def get(self, language: Optional[str] = None) -> DialectProfile:
        """
        Resolve a language name to its profile.

        Args:
            language: Dialect name or alias; None selects standard SQL

        Returns:
            The registered DialectProfile

        Raises:
            UnsupportedDialectError: If the name is not registered
        """
        self._ensure_loaded()
        if language is None:
            language = DEFAULT_DIALECT
        if not isinstance(language, str):
            raise UnsupportedDialectError(str(language))
        key = _normalize(language)
        key = self._aliases.get(key, key)
        profile = self._profiles.get(key)
        if profile is None:
            raise UnsupportedDialectError(language)
        return profile

    def names(self) -> List[str]:
        self._ensure_loaded()
        return sorted(self._profiles)

    def reset(self) -> None:
        """Forget all profiles; bundled ones are reloaded on next lookup."""
        with self._lock:
            self._profiles.clear()
            self._aliases.clear()
            self._loaded = False

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            for path in discover_dialect_files():
                profile, aliases = load_dialect_profile(path)
                # Runtime registrations win over files
                if _normalize(profile.name) not in self._profiles:
                    self.register(profile, aliases)
            self._loaded = True


registry = DialectRegistry()


def get_dialect(language: Optional[str] = None) -> DialectProfile:
    """Resolve a dialect name using the global registry."""
    return registry.get(language)


def register_dialect(profile: DialectProfile, aliases: Iterable[str] = ()) -> None:
    """Register a custom dialect profile in the global registry."""
    registry.register(profile, aliases)


def available_dialects() -> List[str]:
    return registry.names()

"""
Exceptions raised by sql_formatter.

Only configuration problems are errors: an unknown dialect name, a broken
dialect profile or invalid formatting options. Malformed SQL text is never
rejected.
"""


class SqlFormatterConfigError(ValueError):
    """Raised when the formatter is configured incorrectly."""

    pass


class UnsupportedDialectError(SqlFormatterConfigError):
    """Raised when a dialect name is not registered."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unsupported SQL dialect: {language}")


class DialectProfileError(SqlFormatterConfigError):
    """Raised when a dialect profile cannot be loaded or is inconsistent."""

    pass

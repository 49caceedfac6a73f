"""Command-line interface, run with ``python -m sql_formatter.cli``."""

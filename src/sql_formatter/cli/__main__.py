"""
Command-line entry point for sql_formatter.

Usage:
    python -m sql_formatter.cli [file] [options]

Examples:
    # Format a file with the standard SQL dialect
    python -m sql_formatter.cli query.sql

    # Format stdin as Db2, uppercasing keywords
    echo "select * from tbl" | python -m sql_formatter.cli --language db2 --uppercase

    # Substitute placeholders
    python -m sql_formatter.cli query.sql --param id=42 --param name="'bob'"

    # Inspect the token stream
    python -m sql_formatter.cli query.sql --tokens
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional

from sql_formatter.api import format as format_sql
from sql_formatter.api import tokenize as tokenize_sql
from sql_formatter.config.settings import get_settings
from sql_formatter.dialects.registry import available_dialects
from sql_formatter.errors import SqlFormatterConfigError
from sql_formatter.utils.logging import configure_cli_logging, get_logger

logger = get_logger(__name__)


def parse_params(values: List[str]) -> Dict[str, str]:
    """
    Parse repeated KEY=VALUE options into a params mapping.

    Raises:
        SqlFormatterConfigError: If an entry has no "="
    """
    params: Dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep:
            raise SqlFormatterConfigError(f"Invalid --param {item!r}, expected KEY=VALUE")
        params[key] = value
    return params


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="sql_formatter.cli",
        description="Format SQL queries for readability",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m sql_formatter.cli query.sql
  echo "select * from tbl" | python -m sql_formatter.cli --language db2 --uppercase
  python -m sql_formatter.cli query.sql --param id=42
        """,
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="SQL file to format (default: read stdin)",
    )
    parser.add_argument(
        "-l",
        "--language",
        default=settings.default_language,
        help="SQL dialect (default: %(default)s)",
    )
    parser.add_argument(
        "-i",
        "--indent",
        default=settings.default_indent,
        help="Indentation unit (default: two spaces)",
    )
    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "-u",
        "--uppercase",
        dest="reserved_word_case",
        action="store_const",
        const="upper",
        help="Uppercase reserved words",
    )
    case_group.add_argument(
        "--lowercase",
        dest="reserved_word_case",
        action="store_const",
        const="lower",
        help="Lowercase reserved words",
    )
    parser.set_defaults(reserved_word_case=settings.default_reserved_word_case)
    parser.add_argument(
        "-p",
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Placeholder replacement, may be repeated",
    )
    parser.add_argument(
        "--lines-between-queries",
        type=int,
        default=1,
        help="Newlines after each ';' (default: %(default)s)",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream as JSON lines instead of formatting",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the result to this file instead of stdout",
    )
    parser.add_argument(
        "--list-dialects",
        action="store_true",
        help="List available dialects and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Emit debug logs on stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 2 for configuration errors)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_cli_logging("DEBUG")

    try:
        if args.list_dialects:
            print("\n".join(available_dialects()))
            return 0

        query = Path(args.file).read_text(encoding="utf-8") if args.file else sys.stdin.read()

        if args.tokens:
            tokens = tokenize_sql(query, language=args.language)
            result = "\n".join(json.dumps(t.to_dict(), ensure_ascii=False) for t in tokens)
        else:
            result = format_sql(
                query,
                language=args.language,
                indent=args.indent,
                reserved_word_case=args.reserved_word_case,
                params=parse_params(args.param) or None,
                lines_between_queries=args.lines_between_queries,
            )
    except SqlFormatterConfigError as e:
        logger.debug("cli_config_error", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(result + "\n", encoding="utf-8")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from daterange_label import __version__
from daterange_label.config import get_settings
from daterange_label.locales import detect_locale
from daterange_label.renderers import format_date_range, format_time
from daterange_label.schemas import DateRangeFormatOptions, Result


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="date-range-label",
        description="Compact, human-friendly labels for date and time ranges",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # 'format' command - label a range
    format_parser = subparsers.add_parser("format", help="Format a date range")
    format_parser.add_argument("start", help="Range start, ISO 8601")
    format_parser.add_argument("end", help="Range end, ISO 8601")
    format_parser.add_argument(
        "--today",
        default=None,
        help="Reference instant, ISO 8601 (default: now)",
    )
    format_parser.add_argument(
        "--locale",
        default=None,
        help="Locale for clock times, e.g. en-US (default: host locale)",
    )
    format_parser.add_argument(
        "--no-time",
        dest="include_time",
        action="store_false",
        help="Never append times of day",
    )
    format_parser.add_argument(
        "--separator",
        default="-",
        help="Token between the two sides (default: -)",
    )

    # 'time' command - shortened clock time
    time_parser = subparsers.add_parser("time", help="Format a time of day")
    time_parser.add_argument("when", help="Instant, ISO 8601")
    time_parser.add_argument("--locale", default=None, help="Locale, e.g. en-US")

    subparsers.add_parser("info", help="Show application info")

    return parser


def configure_logging(debug: bool = False) -> None:
    """Configure root logging from settings, or DEBUG when ``debug`` is set."""
    level = logging.DEBUG if debug else get_settings().log_level
    logging.basicConfig(
        level=level,
        format=(
            "%(asctime)s %(levelname)s - %(message)s"
            " - from %(funcName)s() in %(filename)s:%(lineno)d"
        ),
    )


def build_label(args: argparse.Namespace) -> Result:
    """Format the range described by parsed ``format`` arguments."""
    try:
        options = DateRangeFormatOptions(
            today=datetime.fromisoformat(args.today) if args.today else None,
            locale=args.locale,
            include_time=args.include_time,
            separator=args.separator,
        )
        label = format_date_range(
            datetime.fromisoformat(args.start), datetime.fromisoformat(args.end), options
        )
    except ValueError as exc:
        return Result(success=False, message="", error=str(exc))
    return Result(success=True, message=label)


def cmd_format(args: argparse.Namespace) -> int:
    """Handle the 'format' command."""
    result = build_label(args)
    if result.success:
        print(result.message)
        return 0
    else:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1


def cmd_time(args: argparse.Namespace) -> int:
    """Handle the 'time' command."""
    try:
        print(format_time(datetime.fromisoformat(args.when), args.locale))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Locale: {detect_locale()}")
    print(f"Fallback locale: {settings.fallback_locale}")
    print(f"Date locale: {settings.date_locale}")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "debug", False))

    commands = {
        "format": cmd_format,
        "time": cmd_time,
        "info": cmd_info,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())

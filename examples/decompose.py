#!/usr/bin/env python3
"""
Calendar decomposition CLI

Converts epoch offsets to calendar fields and calendar dates back to epoch
offsets. No timezone is applied; every value is UTC.

Usage:
    python3 examples/decompose.py [--verbose] seconds <offset> [<offset> ...]
    python3 examples/decompose.py [--verbose] compose <year> <month> <day> [<hour> <minute> <second>]
    python3 examples/decompose.py [--verbose] now

Example:
    python3 examples/decompose.py seconds 0 -1 951782400
    python3 examples/decompose.py compose 2000 2 29 12 0 0
"""

import argparse
import logging
import sys
from pathlib import Path


def get_project_root() -> Path:
    """Locate the repository root containing ``pyproject.toml``."""
    for parent in Path(__file__).resolve().parents:
        if (parent / "pyproject.toml").exists():
            return parent
    raise RuntimeError("Unable to locate project root")


sys.path.insert(0, str(get_project_root() / "src"))

from datetimeutils import DateTimeError, EpochTime  # noqa: E402

logger = logging.getLogger("decompose")


def describe(moment: EpochTime) -> str:
    """One line with every derived quantity of moment."""
    b = moment.breakdown()
    leap = "leap year" if b.is_leap_year else "common year"
    return (
        f"{moment.seconds:>14d}  {moment.isoformat()}  {b.weekday.full_name:<9}  "
        f"day {b.day_of_year:>3d} of {moment.days_in_year} ({leap})"
    )


def cmd_seconds(args: argparse.Namespace) -> int:
    for offset in args.offsets:
        logger.debug("Decomposing offset %d", offset)
        print(describe(EpochTime(offset)))
    return 0


def cmd_compose(args: argparse.Namespace) -> int:
    logger.debug("Composing %s", args.fields)
    print(describe(EpochTime.from_components(*args.fields)))
    return 0


def cmd_now(args: argparse.Namespace) -> int:
    print(describe(EpochTime.now()))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert between epoch seconds and proleptic Gregorian calendar fields (UTC)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    seconds = subparsers.add_parser("seconds", help="Decompose epoch offsets")
    seconds.add_argument("offsets", type=int, nargs="+", help="Signed seconds since 1970-01-01T00:00:00")
    seconds.set_defaults(func=cmd_seconds)

    compose = subparsers.add_parser("compose", help="Compose a date and time into an epoch offset")
    compose.add_argument(
        "fields",
        type=int,
        nargs="+",
        metavar="FIELD",
        help="year month day [hour minute second]",
    )
    compose.set_defaults(func=cmd_compose)

    now = subparsers.add_parser("now", help="Decompose the current host clock reading")
    now.set_defaults(func=cmd_now)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "compose" and len(args.fields) not in (3, 6):
        parser.error("compose expects 3 or 6 fields: year month day [hour minute second]")

    try:
        return args.func(args)
    except DateTimeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

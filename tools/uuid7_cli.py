#!/usr/bin/env python3
"""
uuid7 CLI — Generate and inspect UUIDv7 identifiers.

Usage:
    python -m tools.uuid7_cli new
    python -m tools.uuid7_cli new -n 5
    python -m tools.uuid7_cli validate <uuid> [<uuid> ...]
    python -m tools.uuid7_cli timestamp <uuid> [<uuid> ...]
    python -m tools.uuid7_cli sort <uuid> [<uuid> ...]

Commands:
    new        — Print freshly generated identifiers, one per line
    validate   — Report valid/invalid for each value
    timestamp  — Show the creation time embedded in each identifier
    sort       — Print identifiers in chronological order

Exit status is 1 when any given value is not a valid UUIDv7.
"""

import argparse
import functools
import os
import sys

# Ensure project root is on path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from uuid7_core import (
    InvalidArgumentError,
    compare,
    create_many,
    get_timestamp,
    get_timestamp_ms,
    is_valid,
    try_from_string,
)


# ============================================================
# Commands
# ============================================================

def cmd_new(count: int) -> int:
    """Print `count` new identifiers."""
    try:
        ids = create_many(count)
    except InvalidArgumentError as e:
        print(f"  ERROR: {e}", file=sys.stderr)
        return 1

    for value in ids:
        print(value)
    return 0


def cmd_validate(values: list[str]) -> int:
    """Print one line per value: the value and valid/invalid."""
    status = 0
    for value in values:
        if is_valid(value):
            print(f"{value}  valid")
        else:
            print(f"{value}  invalid")
            status = 1
    return status


def cmd_timestamp(values: list[str]) -> int:
    """Print the ISO-8601 time and raw milliseconds for each identifier."""
    status = 0
    for value in values:
        uid = try_from_string(value)
        if uid is None:
            print(f"  ERROR: Invalid UUIDv7 format: {value!r}", file=sys.stderr)
            status = 1
            continue

        ms = get_timestamp_ms(uid)
        try:
            when = get_timestamp(uid).isoformat(timespec="milliseconds")
        except OverflowError:
            when = "(beyond datetime range)"
        print(f"{uid}  {when}  {ms}")
    return status


def cmd_sort(values: list[str]) -> int:
    """Print identifiers sorted oldest first; refuse if any is invalid."""
    invalid = [v for v in values if not is_valid(v)]
    if invalid:
        for v in invalid:
            print(f"  ERROR: Invalid UUIDv7 format: {v!r}", file=sys.stderr)
        return 1

    for value in sorted(values, key=functools.cmp_to_key(compare)):
        print(value)
    return 0


# ============================================================
# Main
# ============================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="uuid7 CLI — Generate, validate and inspect UUIDv7 identifiers",
        prog="python -m tools.uuid7_cli",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_new = sub.add_parser("new", help="Generate new identifiers")
    p_new.add_argument(
        "--count", "-n",
        type=int,
        default=1,
        help="Number of identifiers to generate (default: 1)",
    )

    for name, help_text in (
        ("validate", "Check values against the UUIDv7 format"),
        ("timestamp", "Show the embedded creation time"),
        ("sort", "Sort identifiers chronologically"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("values", nargs="+", metavar="UUID")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "new":
        return cmd_new(args.count)
    if args.command == "validate":
        return cmd_validate(args.values)
    if args.command == "timestamp":
        return cmd_timestamp(args.values)
    return cmd_sort(args.values)


if __name__ == "__main__":
    sys.exit(main())

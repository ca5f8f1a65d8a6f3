"""Command that fetches a day's input and prints the resonant antinode count."""

from __future__ import annotations

import argparse
import datetime
import os
import sys
import time
from typing import Sequence

from advent.aoc2024.collinearity import find_antennae, find_resonant_antinodes
from advent.fetch import fetch_input

__all__ = ["main"]

_RULE = "================="


def _green(text: str) -> str:
    if sys.stdout.isatty():
        return f"\x1b[32m{text}\x1b[0m"
    return text


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    default_year = os.environ.get("YEAR")
    parser = argparse.ArgumentParser(prog="advent", description=__doc__)
    parser.add_argument(
        "--year",
        type=int,
        default=int(default_year) if default_year else datetime.date.today().year,
        help="puzzle year (default: $YEAR or the current year)",
    )
    parser.add_argument(
        "--day",
        default=os.environ.get("DAY", ""),
        help="puzzle day (default: $DAY)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = _parse_args(argv)
    session_id = os.environ.get("SESSION_ID", "")

    try:
        response = fetch_input(args.year, args.day, session_id)
    except OSError as error:
        print(f"encountered an error fetching Day {args.day} input: {error}")
        return 1

    with response:
        start = time.perf_counter()
        lines = response.read().decode("utf-8").splitlines()

    antennae, dimensions = find_antennae(lines)
    answer = len(find_resonant_antinodes(antennae, dimensions))

    print(_green(_RULE))
    print(_green(str(answer)))
    print(_green(_RULE))
    print("solved in", f"{time.perf_counter() - start:.6f}s")
    return 0


if __name__ == "__main__":
    sys.exit(main())
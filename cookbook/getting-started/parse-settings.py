#!/usr/bin/env python3
"""Recipe: Parse key=value settings, collecting failures instead of raising.

Problem:
    Parsing user input fails often and in predictable ways. Each line either
    yields a typed setting or a reason it was rejected.

What to look at:
    - Structural pattern matching over ``Success`` / ``Failure``.
    - Domain errors are plain exception instances carried as payloads, never
      raised.
"""

from __future__ import annotations

import argparse

from cookbook.utils.presentation import (
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
)
from tagged_result import Failure, Result, Success, failure, success

DEFAULT_LINES = ["retries=3", "timeout=2.5", "verbose", "workers=many"]


class SettingError(ValueError):
    """A settings line could not be parsed."""


def parse_line(line: str) -> Result[tuple[str, float], SettingError]:
    key, sep, raw = line.partition("=")
    if not sep or not key.strip():
        return failure(SettingError(f"expected key=value, got {line!r}"))
    try:
        number = float(raw)
    except ValueError:
        return failure(SettingError(f"{key.strip()}: {raw!r} is not a number"))
    return success((key.strip(), number))


def main_sync(lines: list[str]) -> None:
    accepted: list[tuple[str, object]] = []
    rejected: list[tuple[str, object]] = []
    for line in lines:
        match parse_line(line):
            case Success((key, number)):
                accepted.append((key, number))
            case Failure(error):
                rejected.append((line, error))

    print_section("Accepted")
    print_kv_rows(accepted)
    print_section("Rejected")
    print_kv_rows(rejected)
    print_learning_hints(
        ["Next: pass your own lines, e.g. --line limit=5 --line bad."]
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Parse settings with Result")
    parser.add_argument(
        "--line", action="append", default=None, help="A key=value line (repeatable)"
    )
    args = parser.parse_args()

    print_header("Parse settings")
    main_sync(args.line or DEFAULT_LINES)


if __name__ == "__main__":
    main()

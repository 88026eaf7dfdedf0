#!/usr/bin/env python3
"""Recipe: Divide two numbers without raising on a zero denominator.

Problem:
    Division by zero is an expected outcome here, not a bug. Returning it as a
    Failure keeps the happy path and the error path equally explicit.

When to use:
    - The caller must decide what a failed computation means.
    - You want the error in the return type instead of in a docstring.

What to look at:
    - ``unwrap_tuple()`` gives Go-style ``(value, error)`` pairs.
    - ``unwrap_or()`` substitutes a fallback without branching.
    - ``map()`` transforms only successful values.
"""

from __future__ import annotations

import argparse

from cookbook.utils.presentation import (
    describe,
    print_header,
    print_kv_rows,
    print_learning_hints,
    print_section,
)
from tagged_result import Result, ResultError, failure, success

DIVISION_BY_ZERO = "Division by zero is not allowed"


def divide(numerator: float, denominator: float) -> Result[float, str]:
    if denominator == 0:
        return failure(DIVISION_BY_ZERO)
    return success(numerator / denominator)


def main_sync(numerator: float, denominator: float, *, fallback: float) -> None:
    result = divide(numerator, denominator)
    value, error = result.unwrap_tuple()

    print_section("Result")
    print_kv_rows(
        [
            ("Outcome", describe(result)),
            ("Tuple", (value, error)),
            ("With fallback", result.unwrap_or(fallback)),
            ("Doubled", describe(result.map(lambda q: q * 2))),
        ]
    )

    try:
        misuse = result.unwrap_error() if result.is_success() else result.unwrap()
    except ResultError as exc:
        misuse = f"{exc.name}: {exc.message}"
    print_kv_rows([("Wrong-variant unwrap", misuse)])

    print_learning_hints(
        [
            "Next: pass --denominator 0 to see the Failure path.",
            "Next: replace the string error with a domain exception instance.",
        ]
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Safe division with Result")
    parser.add_argument("--numerator", type=float, default=10.0)
    parser.add_argument("--denominator", type=float, default=2.0)
    parser.add_argument(
        "--fallback", type=float, default=0.0, help="Value used on failure"
    )
    args = parser.parse_args()

    print_header("Safe division")
    main_sync(args.numerator, args.denominator, fallback=args.fallback)


if __name__ == "__main__":
    main()

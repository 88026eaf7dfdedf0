#!/usr/bin/env python3
"""Template: Scenario-first cookbook recipe.

Copy this file when creating a new recipe, then replace placeholders in:
- Problem framing
- The fallible operation and its error type
- Output interpretation
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
from tagged_result import Result, failure, success


def operation(raw: str) -> Result[str, str]:
    """[Replace with a concrete fallible operation]."""
    if not raw:
        return failure("empty input")
    return success(raw.upper())


def main_sync(raw: str) -> None:
    result = operation(raw)
    print_section("Result")
    print_kv_rows([("Outcome", describe(result))])
    print_learning_hints(
        ["Next: replace the string error with a domain-specific error type."]
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Template cookbook recipe")
    parser.add_argument("--input", default="", help="Raw input to process")
    args = parser.parse_args()

    print_header("Template recipe")
    main_sync(args.input)


if __name__ == "__main__":
    main()

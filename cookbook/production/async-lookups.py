#!/usr/bin/env python3
"""Recipe: Return Results from coroutines with AsyncResult.

Problem:
    An async lookup can miss. Annotating the coroutine as ``AsyncResult``
    documents that awaiting it yields a Result, never a raised KeyError.
"""

from __future__ import annotations

import argparse
import asyncio

from cookbook.utils.presentation import (
    describe,
    print_header,
    print_kv_rows,
    print_section,
)
from tagged_result import AsyncResult, Result, failure, success

INVENTORY = {"apple": 3, "pear": 0, "plum": 12}


async def _fetch(name: str, delay_s: float) -> Result[int, str]:
    await asyncio.sleep(delay_s)
    if name not in INVENTORY:
        return failure(f"unknown item: {name}")
    return success(INVENTORY[name])


def lookup(name: str, *, delay_s: float = 0.0) -> AsyncResult[int, str]:
    """Start a lookup; awaiting it yields a Result."""
    return _fetch(name, delay_s)


async def main_async(names: list[str]) -> None:
    results = await asyncio.gather(*(lookup(name) for name in names))
    print_section("Lookups")
    print_kv_rows([(name, describe(r)) for name, r in zip(names, results, strict=True)])


def main() -> None:
    parser = argparse.ArgumentParser(description="Async lookups with AsyncResult")
    parser.add_argument("names", nargs="*", default=["apple", "kiwi", "plum"])
    args = parser.parse_args()

    print_header("Async lookups")
    asyncio.run(main_async(list(args.names)))


if __name__ == "__main__":
    main()

"""Cookbook runner module.

Run cookbook recipes from a dev install, supporting path-like specs
relative to the cookbook folder.

Requires ``pip install -e .`` so that ``import tagged_result`` resolves.

Examples:
- python -m cookbook getting-started/safe-division --numerator 10 --denominator 0
- python -m cookbook getting-started/safe-division --help
- python -m cookbook --list
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
import runpy
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


COOKBOOK_DIRNAME = "cookbook"
EXCLUDE_DIRS = {"utils", "templates", "__pycache__"}

START_HERE_DISPLAY = "getting-started/safe-division.py"


@dataclass(frozen=True)
class RecipeSpec:
    """A resolved recipe specification.

    Attributes:
        path: Absolute path to the recipe Python file.
        display: Human-readable identifier shown to the user.
    """

    path: Path
    display: str


def cookbook_root() -> Path:
    """Return the absolute path to the cookbook directory."""
    return Path(__file__).resolve().parent


def is_recipe_file(path: Path) -> bool:
    name = path.name
    return name.endswith(".py") and name not in {"__init__.py", "__main__.py"}


def list_recipes() -> list[RecipeSpec]:
    """Discover recipe files, skipping helper directories."""
    root = cookbook_root()
    results: list[RecipeSpec] = []
    for path in root.rglob("*.py"):
        rel = path.relative_to(root)
        if any(part in EXCLUDE_DIRS for part in rel.parts):
            continue
        if not is_recipe_file(path):
            continue
        results.append(RecipeSpec(path=path, display=rel.as_posix()))
    results.sort(key=lambda s: s.display)
    return results


def resolve_spec(spec: str) -> RecipeSpec:
    """Resolve a user-provided spec into a recipe under the cookbook.

    Accepts ``getting-started/safe-division``, the same with ``.py``, or
    the same prefixed with ``cookbook/``.
    """
    croot = cookbook_root()
    rel = spec.removeprefix(COOKBOOK_DIRNAME + "/")
    if not rel.endswith(".py"):
        rel += ".py"
    path = (croot / rel).resolve()
    if path.is_file() and path.is_relative_to(croot) and is_recipe_file(path):
        display = path.relative_to(croot)
        if not any(part in EXCLUDE_DIRS for part in display.parts):
            return RecipeSpec(path=path, display=display.as_posix())
    raise FileNotFoundError(
        f"Recipe not found: {spec!r} (looked for {path}). "
        "Use --list to view available recipes."
    )


def _extract_description(recipe: RecipeSpec) -> str:
    """Return the ``Recipe: <description>.`` line of a recipe docstring."""
    try:
        first_lines = recipe.path.read_text().split("\n", 10)
    except OSError:
        return ""
    for line in first_lines:
        stripped = line.strip().strip('"').strip("'")
        if stripped.startswith("Recipe:"):
            return stripped[len("Recipe:") :].strip().rstrip(".")
    return ""


def print_recipe_list(recipes: Iterable[RecipeSpec]) -> None:
    """Print available recipes grouped by category with descriptions."""
    grouped: dict[str, list[RecipeSpec]] = {}
    for r in recipes:
        category, _, _ = r.display.rpartition("/")
        grouped.setdefault(category, []).append(r)

    for category, specs in grouped.items():
        heading = category.replace("-", " ").title() if category else "Recipes"
        print(f"\n  {heading}")
        for spec in specs:
            name = spec.display.removesuffix(".py")
            desc = _extract_description(spec)
            marker = "  <- start here" if spec.display == START_HERE_DISPLAY else ""
            if desc:
                print(f"    {name:<40s} {desc}{marker}")
            else:
                print(f"    {name}{marker}")

    print(
        "\n  Run:   python -m cookbook <recipe>"
        "\n  Help:  python -m cookbook <recipe> --help\n"
    )


def _build_runner_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m cookbook",
        description="tagged-result cookbook: runnable Result recipes.",
    )
    parser.add_argument(
        "spec",
        nargs="?",
        help="Recipe to run (e.g. getting-started/safe-division)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available recipes and exit",
    )
    return parser


def _wants_recipe_help(argv: Sequence[str]) -> str | None:
    """If argv contains a recipe spec followed by --help/-h, return the spec.

    Returns None if the help request is for the runner itself.
    """
    help_flags = {"--help", "-h"}
    if not any(flag in argv for flag in help_flags):
        return None

    for arg in argv:
        if arg in help_flags:
            # Help before any spec: runner help.
            return None
        if arg.startswith("-"):
            continue
        return arg

    return None


def run_recipe(recipe: RecipeSpec, passthrough: Sequence[str]) -> int:
    """Execute the recipe in-process using runpy.

    Sets sys.argv to mimic direct script execution.
    """
    try:
        import tagged_result as _tagged_result  # noqa: F401
    except ImportError:
        print(
            "Error: could not import tagged_result. Run 'pip install -e .' first.",
            file=sys.stderr,
        )
        return 1

    prev_argv = list(sys.argv)
    sys.argv = [str(recipe.path), *passthrough]
    try:
        runpy.run_path(str(recipe.path), run_name="__main__")
    finally:
        sys.argv = prev_argv
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    raw = list(argv) if argv is not None else sys.argv[1:]

    recipe_for_help = _wants_recipe_help(raw)
    if recipe_for_help is not None:
        try:
            spec = resolve_spec(recipe_for_help)
        except FileNotFoundError as exc:
            print(str(exc), file=sys.stderr)
            return 2
        return run_recipe(spec, ["--help"])

    # Recipe flags pass through without a ``--`` separator.
    args, passthrough = _build_runner_parser().parse_known_args(raw)

    if args.list or not args.spec:
        print_recipe_list(list_recipes())
        return 0

    try:
        spec = resolve_spec(args.spec)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    return run_recipe(spec, passthrough)


if __name__ == "__main__":  # pragma: no cover - direct execution guard
    raise SystemExit(main())

"""Command-line front door for cachelist.

Scans the project tree, orders the asset list, and writes the generated
artifact. Any filesystem error aborts the run with a non-zero exit status.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from pathlib import Path

from .artifact import DEFAULT_CACHE_PREFIX, DEFAULT_OUTPUT, render_artifact, write_artifact
from .highlight import colorize_artifact
from .ordering import order_assets
from .scanner import DEFAULT_IGNORE, DEFAULT_ROOT, collect_assets


def _non_empty(value: str) -> str:
    """argparse type rejecting empty fragments, which would match every path."""
    if not value:
        raise argparse.ArgumentTypeError("value must not be empty")
    return value


def effective_ignore(extra: Iterable[str] = ()) -> frozenset[str]:
    """Return the default ignore set plus ``extra`` fragments."""
    return DEFAULT_IGNORE | frozenset(extra)


def build_artifact(
    root: Path = DEFAULT_ROOT,
    output: Path = DEFAULT_OUTPUT,
    cache_prefix: str = DEFAULT_CACHE_PREFIX,
    extra_ignore: Iterable[str] = (),
) -> tuple[str, list[str]]:
    """Scan ``root`` and return ``(artifact_text, ordered_assets)``.

    The artifact file itself is left out by exact location, never by name.
    """
    assets = collect_assets(root, effective_ignore(extra_ignore), exclude=(output,))
    ordered = order_assets(assets)
    return render_artifact(ordered, cache_prefix), ordered


def generate(
    root: Path = DEFAULT_ROOT,
    output: Path = DEFAULT_OUTPUT,
    cache_prefix: str = DEFAULT_CACHE_PREFIX,
    extra_ignore: Iterable[str] = (),
) -> list[str]:
    """Run scan, order, serialize, and write; print the two summary lines.

    Returns the ordered asset list that was written. ``OSError`` from the
    walk or the write propagates to the caller.
    """
    text, ordered = build_artifact(root, output, cache_prefix, extra_ignore)
    write_artifact(output, text)
    print(f"Cache list generated in: {output}")
    print(f"Total assets cached: {len(ordered)}")
    return ordered


def main() -> None:
    """Parse CLI arguments and generate the cache asset list.

    With no arguments the current directory is scanned and
    ``generated-assets.js`` is overwritten.
    """
    parser = argparse.ArgumentParser(
        description="Generate the offline cache asset list for a web project."
    )
    parser.add_argument("--root", type=Path, default=DEFAULT_ROOT, help="Directory to scan (default: ./).")
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Generated artifact path (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--cache-prefix",
        default=DEFAULT_CACHE_PREFIX,
        help=f"Cache identifier prefix (default: {DEFAULT_CACHE_PREFIX}).",
    )
    parser.add_argument(
        "--ignore",
        metavar="FRAGMENT",
        type=_non_empty,
        action="append",
        default=[],
        help="Extra path fragment to skip; may be repeated.",
    )
    parser.add_argument("--stdout", action="store_true", help="Print the artifact instead of writing it.")
    parser.add_argument("--no-color", action="store_true", help="Disable highlighting of --stdout output.")
    args = parser.parse_args()

    try:
        if args.stdout:
            text, _ordered = build_artifact(args.root, args.output, args.cache_prefix, args.ignore)
            if not args.no_color and sys.stdout.isatty():
                text = colorize_artifact(text)
            sys.stdout.write(text)
            return
        generate(args.root, args.output, args.cache_prefix, args.ignore)
    except OSError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()

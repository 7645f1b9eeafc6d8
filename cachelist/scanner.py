"""Recursive directory walk collecting cacheable asset paths.

Ignore fragments are matched as plain substrings of the root-relative path,
so a fragment prunes every file or directory whose path mentions it anywhere.
Read errors are not caught here; they abort the whole scan.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from .asset_path import AssetPath

DEFAULT_ROOT = Path("./")
DEFAULT_IGNORE: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        "generate-cache-list.js",
        "service-worker.js",
        "generated-assets.js",
    }
)


def is_ignored(path: AssetPath, ignore: Iterable[str]) -> bool:
    """Return whether any ignore fragment occurs inside ``path``."""
    return any(path.contains(fragment) for fragment in ignore)


def entry_name(raw_name: str) -> str:
    """Decode a directory entry name, replacing undecodable bytes with U+FFFD."""
    return os.fsencode(raw_name).decode("utf-8", errors="replace")


def _resolved_location(path: Path) -> Path:
    """Resolve the parent only, so a symlinked entry keeps its own name."""
    return path.parent.resolve() / path.name


def scan_directory(
    directory: Path,
    assets: list[str],
    ignore: Iterable[str] = DEFAULT_IGNORE,
    relative: AssetPath | None = None,
    exclude: Iterable[Path] = (),
) -> None:
    """Append normalized file paths under ``directory`` to ``assets``.

    ``relative`` is the manifest path of ``directory`` itself and defaults to
    the root marker. Entries are visited depth-first in name order; ignored
    directories are pruned without being listed. ``exclude`` names exact files
    to leave out, compared by resolved location rather than by substring.
    """
    if relative is None:
        relative = AssetPath.root()
    ignore = tuple(ignore)
    exclude = frozenset(_resolved_location(path) for path in exclude)
    resolved_directory = directory.resolve() if exclude else directory

    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        entry_path = relative.join(entry_name(entry.name))
        if is_ignored(entry_path.to_forward_slash(), ignore):
            continue
        if entry.is_dir(follow_symlinks=False):
            scan_directory(Path(entry.path), assets, ignore, entry_path, exclude)
        elif resolved_directory / entry.name not in exclude:
            assets.append(str(entry_path.normalized()))


def collect_assets(
    root: Path = DEFAULT_ROOT,
    ignore: Iterable[str] = DEFAULT_IGNORE,
    exclude: Iterable[Path] = (),
) -> list[str]:
    """Scan ``root`` and return the raw asset list in traversal order."""
    assets: list[str] = []
    scan_directory(root, assets, ignore, exclude=exclude)
    return assets


__all__ = [
    "DEFAULT_ROOT",
    "DEFAULT_IGNORE",
    "entry_name",
    "is_ignored",
    "scan_directory",
    "collect_assets",
]

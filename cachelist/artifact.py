"""Serialize the ordered asset list into the generated JavaScript artifact.

The artifact declares ``CACHE`` as a source-level expression so every load
of the generated file produces a fresh identifier, and ``ASSETS`` as a
pretty-printed JSON array literal.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

DEFAULT_OUTPUT = Path("generated-assets.js")
DEFAULT_CACHE_PREFIX = "flashcards-v"
HEADER_COMMENT = "// auto-generated — do not modify manually!"
CACHE_TIME_EXPRESSION = "Date.now()"
ASSETS_DECLARATION = "const ASSETS = "


class ArtifactFormatError(ValueError):
    """Raised when artifact text has no parsable ``ASSETS`` declaration."""


def render_artifact(assets: Sequence[str], cache_prefix: str = DEFAULT_CACHE_PREFIX) -> str:
    """Return the artifact text for an already ordered asset list."""
    prefix_literal = json.dumps(cache_prefix, ensure_ascii=False)
    assets_literal = json.dumps(list(assets), indent=2, ensure_ascii=False)
    return (
        "\n"
        f"{HEADER_COMMENT}\n"
        f"const CACHE = {prefix_literal} + {CACHE_TIME_EXPRESSION};\n"
        "\n"
        f"{ASSETS_DECLARATION}{assets_literal};\n"
    )


def write_artifact(path: Path, text: str) -> None:
    """Overwrite ``path`` with ``text``; filesystem errors propagate.

    Text is encoded before the file is opened, so an encoding failure leaves
    any previous artifact untouched.
    """
    path.write_bytes(text.encode("utf-8"))


def parse_artifact_assets(text: str) -> list[str]:
    """Read the ``ASSETS`` array back out of artifact text."""
    start = text.find(ASSETS_DECLARATION)
    if start < 0:
        raise ArtifactFormatError("missing ASSETS declaration")
    try:
        value, _end = json.JSONDecoder().raw_decode(text, start + len(ASSETS_DECLARATION))
    except json.JSONDecodeError as exc:
        raise ArtifactFormatError(f"malformed ASSETS array: {exc}") from exc
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ArtifactFormatError("ASSETS must be an array of strings")
    return value


__all__ = [
    "DEFAULT_OUTPUT",
    "DEFAULT_CACHE_PREFIX",
    "HEADER_COMMENT",
    "ArtifactFormatError",
    "render_artifact",
    "write_artifact",
    "parse_artifact_assets",
]

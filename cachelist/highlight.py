"""Terminal rendering of generated artifacts.

Highlights JavaScript with Pygments and neutralizes terminal control bytes
that may arrive through file names.
"""

from __future__ import annotations

import re

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JavascriptLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def escape_control_chars(source: str) -> str:
    """Replace control characters other than tab and newlines with ``\\xNN``.

    ``json.dumps`` already escapes C0 controls inside asset names; DEL and C1
    controls pass through it and would otherwise reach the terminal raw.
    """
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group()):02x}", source)


def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def colorize_artifact(source: str, style: str = DEFAULT_STYLE) -> str:
    """Return ``source`` with ANSI JavaScript highlighting."""
    formatter = TerminalFormatter(style=_normalize_style(style))
    return pygments_highlight(escape_control_chars(source), JavascriptLexer(stripnl=False), formatter)


__all__ = ["DEFAULT_STYLE", "escape_control_chars", "colorize_artifact"]

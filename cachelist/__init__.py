"""cachelist: build-time generator of offline cache asset lists.

``main`` is re-exported so ``cachelist.main()`` runs the same flow as the
console script without importing the scanner at package import time.
"""

from __future__ import annotations


def main(*args, **kwargs):
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]

"""Final manifest ordering: root marker and index document always lead."""

from __future__ import annotations

from collections.abc import Iterable

from .asset_path import ROOT_MARKER

INDEX_DOCUMENT = "./index.html"


def order_assets(assets: Iterable[str]) -> list[str]:
    """Return ``[ROOT_MARKER, INDEX_DOCUMENT, *rest]``.

    Both sentinels are inserted whether or not the scan found them. Existing
    sentinel entries are dropped from ``rest`` so reordering an already
    ordered list returns it unchanged.
    """
    rest = [asset for asset in assets if asset not in (ROOT_MARKER, INDEX_DOCUMENT)]
    return [ROOT_MARKER, INDEX_DOCUMENT, *rest]


__all__ = ["ROOT_MARKER", "INDEX_DOCUMENT", "order_assets"]

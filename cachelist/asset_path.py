"""Browser-style relative paths for cache manifest entries."""

from __future__ import annotations

from dataclasses import dataclass

ROOT_MARKER = "./"


@dataclass(frozen=True)
class AssetPath:
    """Root-relative asset path as it appears in the generated manifest.

    Values are built by joining directory entry names onto ``AssetPath.root()``
    and are only ever rendered through ``normalized()``, which guarantees
    forward slashes and a leading ``./``.
    """

    value: str

    @classmethod
    def root(cls) -> AssetPath:
        """Return the root marker ``./``."""
        return cls(ROOT_MARKER)

    def join(self, name: str) -> AssetPath:
        """Append one directory entry name."""
        base = self.value if self.value.endswith(("/", "\\")) else self.value + "/"
        return AssetPath(base + name)

    def to_forward_slash(self) -> AssetPath:
        return AssetPath(self.value.replace("\\", "/"))

    def ensure_prefix(self) -> AssetPath:
        """Prefix with ``./`` unless already present."""
        if self.value.startswith(ROOT_MARKER):
            return self
        return AssetPath(ROOT_MARKER + self.value.lstrip("/"))

    def normalized(self) -> AssetPath:
        return self.to_forward_slash().ensure_prefix()

    def contains(self, fragment: str) -> bool:
        """Substring test used by ignore matching; not segment-aware."""
        return fragment in self.value

    def __str__(self) -> str:
        return self.value


__all__ = ["ROOT_MARKER", "AssetPath"]

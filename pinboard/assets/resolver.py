"""Asset resolver — map identifiers to files under a project root.

Identifiers are ``/``-separated paths relative to the root, for example
``Assets/Prefabs/Door.prefab``.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable

from pinboard.errors import AssetNotFoundError, UnpinnableAssetError

DEFAULT_EXTENSIONS = frozenset({".prefab"})

# Directories never searched by discover()
SKIP_DIRS = {
    ".git", ".svn", ".hg", "__pycache__", "node_modules", ".venv", "venv",
    "Library", "Temp", "Logs", "obj", "build", "dist",
}


class AssetResolver:
    """Checks identifiers against the files in a project directory."""

    def __init__(self, root: str | Path, extensions: Iterable[str] | None = None):
        self.root = Path(root).expanduser().resolve()
        if extensions is None:
            extensions = DEFAULT_EXTENSIONS
        self.extensions = frozenset(
            n for n in (_normalize_extension(e) for e in extensions) if n
        )

    def is_pinnable(self, path: Path) -> bool:
        """Whether a file has one of the pinnable extensions."""
        return not self.extensions or path.suffix.lower() in self.extensions

    def resolve(self, identifier: str) -> Path:
        """Return the absolute file path for an identifier.

        Raises AssetNotFoundError if nothing exists there, and
        UnpinnableAssetError for directories, wrong extensions, or paths
        leaving the root.
        """
        if not identifier or not identifier.strip():
            raise AssetNotFoundError(identifier, "empty identifier")

        path = (self.root / PurePosixPath(identifier)).resolve()
        if not path.is_relative_to(self.root):
            raise UnpinnableAssetError(identifier, f"outside of {self.root}")
        if not path.exists():
            raise AssetNotFoundError(identifier, "no such asset")
        if not path.is_file():
            raise UnpinnableAssetError(identifier, "not a file")
        if not self.is_pinnable(path):
            allowed = ", ".join(sorted(self.extensions))
            raise UnpinnableAssetError(identifier, f"only {allowed} assets can be pinned")
        return path

    def identifier_for(self, path: str | Path) -> str:
        """Turn a filesystem path into an identifier relative to the root."""
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = Path.cwd() / candidate
        candidate = candidate.resolve()
        if not candidate.is_relative_to(self.root):
            raise UnpinnableAssetError(str(path), f"outside of {self.root}")
        return candidate.relative_to(self.root).as_posix()

    def discover(self) -> list[str]:
        """List every pinnable identifier under the root, sorted."""
        found = []
        for item in self.root.rglob("*"):
            if not item.is_file() or not self.is_pinnable(item):
                continue
            relative = item.relative_to(self.root)
            if any(part in SKIP_DIRS for part in relative.parts[:-1]):
                continue
            found.append(relative.as_posix())
        return sorted(found)


def _normalize_extension(extension: str) -> str:
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension

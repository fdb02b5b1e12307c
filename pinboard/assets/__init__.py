"""Asset lookup — decide which identifiers name pinnable files."""

from pinboard.assets.resolver import DEFAULT_EXTENSIONS, SKIP_DIRS, AssetResolver

__all__ = ["AssetResolver", "DEFAULT_EXTENSIONS", "SKIP_DIRS"]

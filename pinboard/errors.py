"""Exception hierarchy for pinboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pinboard.registry.models import SaveResult


class PinboardError(Exception):
    """Base class for all pinboard errors."""


class PersistenceUnavailableError(PinboardError):
    """The store could not save the registry state.

    The in-memory mutation that triggered the save is kept; the next
    successful save writes it out.
    """

    def __init__(self, result: SaveResult):
        self.result = result
        super().__init__(f"Could not save pins to {result.path}: {result.error}")


class AssetResolutionError(PinboardError):
    """An identifier does not name a pinnable asset."""

    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"{identifier}: {reason}")


class AssetNotFoundError(AssetResolutionError):
    """No file exists for the identifier."""


class UnpinnableAssetError(AssetResolutionError):
    """The file exists but cannot be pinned (wrong type or outside the root)."""


class ConfigError(PinboardError):
    """Invalid configuration file or value."""

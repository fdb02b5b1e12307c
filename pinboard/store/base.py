"""Store contract shared by every persistence backend."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pinboard.registry.models import PinboardState, SaveResult


class PinStore(ABC):
    """Loads and saves a ``PinboardState``.

    ``save`` reports failure through the returned ``SaveResult`` rather than
    raising, so the registry can decide how to surface it.
    """

    @abstractmethod
    def load(self) -> PinboardState:
        """Return the stored state, or an empty one if nothing is stored."""

    @abstractmethod
    def save(self, state: PinboardState) -> SaveResult:
        """Store ``state``, replacing whatever was stored before."""

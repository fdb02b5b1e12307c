"""Pinned-item registry.

Keeps two ordered lists of asset identifiers, "pinned" and "history", and
moves identifiers between them. An identifier is never in both lists.
Every change is handed to the injected store; operations that find nothing
to do are silent no-ops and do not touch the store.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pinboard.errors import PersistenceUnavailableError
from pinboard.registry.models import PinboardState, PinList

if TYPE_CHECKING:
    from pinboard.store.base import PinStore

logger = logging.getLogger(__name__)


class PinRegistry:
    """In-memory pinned/history lists backed by a ``PinStore``.

    Use ``load()`` to read the stored lists and ``flush()`` to write them
    back, or use the registry as a context manager to do both::

        with PinRegistry(JsonPinStore(path)) as registry:
            registry.pin("Assets/Prefabs/Door.prefab")

    ``in`` and ``len()`` cover both lists; use ``is_pinned()`` or
    ``pinned`` for the pinned list alone.
    """

    def __init__(self, store: PinStore):
        self.store = store
        self._pinned: list[str] = []
        self._history: list[str] = []

    # -- lifecycle -----------------------------------------------------------

    def load(self) -> PinRegistry:
        """Replace the in-memory lists with the store's contents."""
        state = self.store.load()
        self._pinned = list(state.pinned)
        self._history = list(state.history)
        logger.debug(
            "Loaded %d pinned and %d history items", len(self._pinned), len(self._history)
        )
        return self

    def flush(self) -> None:
        """Save the current lists, raising if the store is unavailable."""
        self._persist()

    def __enter__(self) -> PinRegistry:
        return self.load()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.flush()

    # -- read access ---------------------------------------------------------

    @property
    def pinned(self) -> list[str]:
        return list(self._pinned)

    @property
    def history(self) -> list[str]:
        return list(self._history)

    @property
    def state(self) -> PinboardState:
        return PinboardState(pinned=self.pinned, history=self.history)

    def is_pinned(self, identifier: str) -> bool:
        return identifier in self._pinned

    def in_history(self, identifier: str) -> bool:
        return identifier in self._history

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._pinned or identifier in self._history

    def __len__(self) -> int:
        return len(self._pinned) + len(self._history)

    # -- mutations -----------------------------------------------------------

    def pin(self, identifier: str) -> bool:
        """Append an identifier to the pinned list.

        A history entry for the same identifier is dropped so the two lists
        stay disjoint. Returns False if it was already pinned.
        """
        if not self._pin(identifier):
            return False
        self._persist()
        return True

    def unpin(self, identifier: str) -> bool:
        """Move a pinned identifier to the end of the history list."""
        if not self._unpin(identifier):
            return False
        self._persist()
        return True

    def restore(self, identifier: str) -> bool:
        """Move a history identifier back to the end of the pinned list."""
        if identifier not in self._history:
            return False
        self._history.remove(identifier)
        self._pin(identifier)
        self._persist()
        return True

    def remove_from_history(self, identifier: str) -> bool:
        """Forget a history identifier without restoring it."""
        if not self._remove_from_history(identifier):
            return False
        self._persist()
        return True

    def clear_pinned(self) -> int:
        """Unpin everything, in pin order. Returns how many items moved."""
        moved = sum(1 for identifier in list(self._pinned) if self._unpin(identifier))
        if moved:
            self._persist()
        return moved

    def clear_history(self) -> int:
        """Empty the history list. Returns how many items were removed."""
        removed = sum(
            1 for identifier in list(self._history) if self._remove_from_history(identifier)
        )
        if removed:
            self._persist()
        return removed

    def clear(self, which: PinList = PinList.PINNED) -> int:
        """Clear whichever list is selected."""
        if which == PinList.HISTORY:
            return self.clear_history()
        return self.clear_pinned()

    # -- internals -----------------------------------------------------------

    def _pin(self, identifier: str) -> bool:
        if identifier in self._pinned:
            return False
        if identifier in self._history:
            self._history.remove(identifier)
        self._pinned.append(identifier)
        logger.debug("Pinned %s", identifier)
        return True

    def _unpin(self, identifier: str) -> bool:
        if identifier not in self._pinned:
            return False
        if identifier not in self._history:
            self._history.append(identifier)
        self._pinned.remove(identifier)
        logger.debug("Unpinned %s", identifier)
        return True

    def _remove_from_history(self, identifier: str) -> bool:
        if identifier not in self._history:
            return False
        self._history.remove(identifier)
        logger.debug("Removed %s from history", identifier)
        return True

    def _persist(self) -> None:
        result = self.store.save(self.state)
        if not result.ok:
            logger.warning("Save failed for %s: %s", result.path, result.error)
            raise PersistenceUnavailableError(result)

"""In-memory store, for tests and throwaway sessions."""

from __future__ import annotations

from pinboard.registry.models import PinboardState, SaveResult
from pinboard.store.base import PinStore


class MemoryPinStore(PinStore):
    """Keeps the last saved state in memory.

    Set ``fail_saves`` to make every save report the backend as unavailable.
    """

    def __init__(self, state: PinboardState | None = None, fail_saves: bool = False):
        self._state = state or PinboardState()
        self.fail_saves = fail_saves
        self.save_count = 0

    def load(self) -> PinboardState:
        return PinboardState(pinned=list(self._state.pinned), history=list(self._state.history))

    def save(self, state: PinboardState) -> SaveResult:
        if self.fail_saves:
            return SaveResult.failed("<memory>", "store unavailable")
        self._state = PinboardState(pinned=list(state.pinned), history=list(state.history))
        self.save_count += 1
        return SaveResult(ok=True, path="<memory>")

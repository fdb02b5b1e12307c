"""Registry — the pinned and history lists and the moves between them.

The registry provides:
- Pinning: keep an ordered list of favourite asset identifiers
- History: remember what was unpinned so it can be restored
- Persistence hooks: hand the state to a store after every change
"""

from pinboard.registry.models import PinboardState, PinList, SaveResult
from pinboard.registry.pin_registry import PinRegistry

__all__ = [
    "PinboardState",
    "PinList",
    "PinRegistry",
    "SaveResult",
]

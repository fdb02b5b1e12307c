"""Registry data models — list snapshots and save results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

STATE_FORMAT_VERSION = 1


class PinList(str, Enum):
    """The two lists a registry keeps."""

    PINNED = "pinned"
    HISTORY = "history"


@dataclass
class PinboardState:
    """Snapshot of both lists, in insertion order."""

    pinned: list[str] = field(default_factory=list)
    history: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "version": STATE_FORMAT_VERSION,
            "pinned": list(self.pinned),
            "history": list(self.history),
        }

    @classmethod
    def from_dict(cls, data: dict) -> PinboardState:
        """Build a state from stored data, repairing duplicates.

        Repeated entries keep their first position. An identifier found in
        both lists stays pinned and is dropped from history. Raises
        ValueError if either list is not a list of strings.
        """
        pinned = _unique(_string_list(data, "pinned"))
        pinned_set = set(pinned)
        history = _unique([h for h in _string_list(data, "history") if h not in pinned_set])
        return cls(pinned=pinned, history=history)

    @property
    def is_empty(self) -> bool:
        return not self.pinned and not self.history


@dataclass
class SaveResult:
    """Outcome of handing a state to a store."""

    ok: bool = True
    path: str = ""
    error: str = ""  # Empty when ok

    @classmethod
    def failed(cls, path: str, error: str) -> SaveResult:
        return cls(ok=False, path=path, error=error)


def _unique(items: list[str]) -> list[str]:
    seen: set[str] = set()
    result = []
    for item in items:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


def _string_list(data: dict, key: str) -> list[str]:
    items = data.get(key)
    if items is None:
        return []
    if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
        raise ValueError(f"{key!r} must be a list of strings")
    return items

"""Persistence stores for the pinned/history lists."""

from pinboard.store.base import PinStore
from pinboard.store.json_store import JsonPinStore
from pinboard.store.memory_store import MemoryPinStore

__all__ = ["JsonPinStore", "MemoryPinStore", "PinStore"]

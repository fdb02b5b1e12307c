"""JSON file store.

Storage layout (single file, default ``~/.pinboard/pins.json``)::

    {"version": 1, "pinned": ["Assets/A.prefab"], "history": []}
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pinboard.registry.models import PinboardState, SaveResult
from pinboard.store.base import PinStore

logger = logging.getLogger(__name__)


class JsonPinStore(PinStore):
    """Persists the pinned/history lists to a JSON file."""

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def load(self) -> PinboardState:
        if not self.path.exists():
            return PinboardState()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Ignoring unreadable pin file %s: %s", self.path, e)
            return PinboardState()
        if not isinstance(data, dict):
            logger.warning("Ignoring pin file %s: expected a JSON object", self.path)
            return PinboardState()
        try:
            return PinboardState.from_dict(data)
        except ValueError as e:
            logger.warning("Ignoring malformed pin file %s: %s", self.path, e)
            return PinboardState()

    def save(self, state: PinboardState) -> SaveResult:
        try:
            self._write_atomic(json.dumps(state.to_dict(), indent=2))
        except OSError as e:
            return SaveResult.failed(str(self.path), str(e))
        logger.debug("Saved pins to %s", self.path)
        return SaveResult(ok=True, path=str(self.path))

    def _write_atomic(self, content: str) -> None:
        # Temp file in the same directory so the rename stays on one filesystem
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        temp_path = Path(temp_name)
        try:
            try:
                f = os.fdopen(fd, "w", encoding="utf-8")
            except OSError:
                os.close(fd)
                raise
            with f:
                f.write(content)
            temp_path.replace(self.path)
        except OSError:
            if temp_path.exists():
                temp_path.unlink()
            raise

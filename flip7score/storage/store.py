"""
Game Store - Single-slot persistence for the scoreboard.

The store:
- Holds exactly one blob under one key
- Is replaced whole on every save (no partial writes)
- Is injected into the scoreboard, so the engine never touches disk itself

Design decisions:
- Simple file-based storage, one JSON file per key
- Writes go to a temporary file that replaces the slot atomically
- I/O failures surface as StorageError; callers decide whether to carry on
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from copy import deepcopy
import json
import logging
import os
from pathlib import Path
import tempfile
from typing import Any

from ..errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_KEY = "flip7-scoreboard"


class Store(ABC):
    """
    A single named slot holding the serialized game.

    Usage:
        store = JsonFileStore("~/.flip7score")

        data = store.load()
        if data is None:
            ...  # nothing saved yet

        store.save(state.to_dict())
        store.clear()
    """

    @abstractmethod
    def load(self) -> dict[str, Any] | None:
        """Return the saved blob, or None if the slot is empty."""

    @abstractmethod
    def save(self, data: dict[str, Any]):
        """Replace the slot with data."""

    @abstractmethod
    def clear(self):
        """Empty the slot."""


class MemoryStore(Store):
    """In-process slot. Used by tests and when nothing should hit disk."""

    def __init__(self, data: dict[str, Any] | None = None):
        self._data = deepcopy(data)

    def load(self) -> dict[str, Any] | None:
        return deepcopy(self._data)

    def save(self, data: dict[str, Any]):
        self._data = deepcopy(data)

    def clear(self):
        self._data = None


class JsonFileStore(Store):
    """
    Slot backed by one JSON file: <directory>/<key>.json
    """

    def __init__(self, directory: str | Path | None = None, key: str = DEFAULT_KEY):
        if directory is None:
            directory = Path.home() / ".flip7score"
        self.directory = Path(directory).expanduser()
        self.key = key

    @property
    def path(self) -> Path:
        return self.directory / f"{self.key}.json"

    def load(self) -> dict[str, Any] | None:
        if not self.path.exists():
            return None

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Could not read saved game from {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Saved game in {self.path} is not a JSON object")
        return data

    def save(self, data: dict[str, Any]):
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=self.directory, prefix=f".{self.key}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                os.replace(tmp_path, self.path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(f"Could not save game to {self.path}: {e}") from e
        logger.debug("Saved game to %s", self.path)

    def clear(self):
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Could not remove saved game {self.path}: {e}") from e
        logger.debug("Cleared saved game %s", self.path)

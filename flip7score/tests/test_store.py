"""
Tests for the save slot.
"""

import json

import pytest

from ..errors import StorageError
from ..storage import DEFAULT_KEY, JsonFileStore, MemoryStore


BLOB = {
    "gameStarted": True,
    "players": [{"name": "Alice", "scores": [[5, 3, "x2"], "BUST"], "total": 16}],
    "currentRound": 3,
}


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_empty(self):
        assert MemoryStore().load() is None

    def test_save_and_load(self):
        store = MemoryStore()
        store.save(BLOB)
        assert store.load() == BLOB

    def test_copies(self):
        """Callers cannot reach into the slot."""
        store = MemoryStore()
        data = {"players": []}
        store.save(data)
        data["players"].append("x")
        loaded = store.load()
        loaded["gameStarted"] = False
        assert store.load() == {"players": []}

    def test_clear(self):
        store = MemoryStore(BLOB)
        store.clear()
        assert store.load() is None


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    def test_path(self, tmp_path):
        store = JsonFileStore(tmp_path)
        assert store.path == tmp_path / f"{DEFAULT_KEY}.json"

    def test_missing_file(self, tmp_path):
        assert JsonFileStore(tmp_path).load() is None

    def test_save_and_load(self, tmp_path):
        store = JsonFileStore(tmp_path / "nested")
        store.save(BLOB)
        assert store.load() == BLOB
        assert json.loads(store.path.read_text(encoding="utf-8")) == BLOB

    def test_save_replaces(self, tmp_path):
        """Each save replaces the slot and leaves no temp files."""
        store = JsonFileStore(tmp_path)
        store.save(BLOB)
        store.save({"gameStarted": False})
        assert store.load() == {"gameStarted": False}
        assert [p.name for p in tmp_path.iterdir()] == [store.path.name]

    def test_keys_are_separate(self, tmp_path):
        JsonFileStore(tmp_path, key="a").save(BLOB)
        assert JsonFileStore(tmp_path, key="b").load() is None

    def test_clear(self, tmp_path):
        store = JsonFileStore(tmp_path)
        store.save(BLOB)
        store.clear()
        assert not store.path.exists()
        store.clear()

    def test_corrupt_file(self, tmp_path):
        store = JsonFileStore(tmp_path)
        store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StorageError):
            store.load()

    def test_not_an_object(self, tmp_path):
        store = JsonFileStore(tmp_path)
        store.path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(StorageError):
            store.load()

    def test_unwritable_directory(self, tmp_path):
        """A file where the directory should be is a storage error."""
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(StorageError):
            JsonFileStore(blocker).save(BLOB)

    def test_unserializable(self, tmp_path):
        store = JsonFileStore(tmp_path)
        with pytest.raises(StorageError):
            store.save({"bad": object()})
        assert list(tmp_path.iterdir()) == []

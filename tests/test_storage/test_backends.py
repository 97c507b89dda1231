"""Tests for the InMemoryStore and JsonFileStore key-value backends."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from matrix_training.exceptions import MalformedPersistedData
from matrix_training.storage.backends import InMemoryStore, JsonFileStore


class TestInMemoryStore:
    def test_absent_key_is_none(self) -> None:
        assert InMemoryStore().get("15_HEAVY") is None

    def test_round_trip(self) -> None:
        store = InMemoryStore()
        store.set("k", [{"time": 1}])
        assert store.get("k") == [{"time": 1}]

    def test_values_are_copied(self) -> None:
        store = InMemoryStore()
        value = [1, 2]
        store.set("k", value)
        value.append(3)
        store.get("k").append(4)
        assert store.get("k") == [1, 2]

    def test_initial_values(self) -> None:
        store = InMemoryStore({"a": 1})
        assert store.keys() == ["a"]

    def test_undecodable_raw_value(self) -> None:
        store = InMemoryStore()
        store.set_raw("k", "{not json")
        with pytest.raises(MalformedPersistedData):
            store.get("k")


class TestJsonFileStore:
    def test_missing_file_reads_empty(self, tmp_path: Path) -> None:
        store = JsonFileStore(tmp_path / "history.json")
        assert store.get("15_HEAVY") is None
        assert store.keys() == []

    def test_set_creates_file_and_parent(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "history.json"
        store = JsonFileStore(path)
        store.set("15_HEAVY", [{"time": 1, "sets": [{"reps": 8, "weight": 100}]}])
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "15_HEAVY": [{"time": 1, "sets": [{"reps": 8, "weight": 100}]}]
        }

    def test_keys_are_independent(self, tmp_path: Path) -> None:
        store = JsonFileStore(tmp_path / "history.json")
        store.set("a", 1)
        store.set("b", 2)
        store.set("a", 3)
        assert store.get("a") == 3
        assert store.get("b") == 2

    def test_reads_reflect_external_writes(self, tmp_path: Path) -> None:
        path = tmp_path / "history.json"
        store = JsonFileStore(path)
        store.set("a", 1)
        JsonFileStore(path).set("a", 2)
        assert store.get("a") == 2

    def test_no_temp_files_left_behind(self, tmp_path: Path) -> None:
        store = JsonFileStore(tmp_path / "history.json")
        store.set("a", 1)
        store.set("a", 2)
        assert [p.name for p in tmp_path.iterdir()] == ["history.json"]

    def test_corrupt_file(self, tmp_path: Path) -> None:
        path = tmp_path / "history.json"
        path.write_text("{oops", encoding="utf-8")
        with pytest.raises(MalformedPersistedData):
            JsonFileStore(path).get("a")

    def test_non_object_file(self, tmp_path: Path) -> None:
        path = tmp_path / "history.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(MalformedPersistedData):
            JsonFileStore(path).get("a")

    def test_failed_replace_cleans_up_temp_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "history.json"
        store = JsonFileStore(path)
        store.set("a", 1)

        def _fail(self: Path, target: Path) -> Path:
            raise OSError("disk full")

        monkeypatch.setattr(Path, "replace", _fail)
        with pytest.raises(OSError, match="disk full"):
            store.set("a", 2)
        monkeypatch.undo()

        assert [p.name for p in tmp_path.iterdir()] == ["history.json"]
        assert store.get("a") == 1

"""Key-value persistence backends for JSON values.

The history store only needs ``get(key)`` and ``set(key, value)``; anything
offering those two calls can back it.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Any

from matrix_training.exceptions import MalformedPersistedData

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """String-keyed storage of JSON values."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the JSON value stored at *key*, or None if absent."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store the JSON value *value* at *key*, replacing any previous one."""
        ...


class InMemoryStore(KeyValueStore):
    """Dict-backed store holding encoded JSON text.

    Values are encoded on write and decoded on read, so callers never share
    mutable structures with the store.
    """

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key: str) -> Any | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedPersistedData(f"Could not parse value for {key}: {exc}", key=key) from exc

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    def set_raw(self, key: str, text: str) -> None:
        """Store *text* verbatim, bypassing encoding."""
        self._data[key] = text

    def keys(self) -> list[str]:
        return sorted(self._data)


class JsonFileStore(KeyValueStore):
    """All keys in one JSON object file, rewritten atomically on each set.

    A missing file reads as empty. Every ``get`` re-reads the file.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def get(self, key: str) -> Any | None:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("Wrote key %s to %s", key, self.path)

    def keys(self) -> list[str]:
        return sorted(self._read_all())

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        raw = self.path.read_text(encoding="utf-8").strip() or "{}"
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedPersistedData(f"Could not parse {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise MalformedPersistedData(f"{self.path} must contain a JSON object")
        return data

    def _write_all(self, data: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(data, indent=2, sort_keys=True) + "\n"

        temp_path: Path | None = None
        try:
            with NamedTemporaryFile(
                "w", dir=self.path.parent, delete=False, encoding="utf-8"
            ) as tmp:
                temp_path = Path(tmp.name)
                tmp.write(payload)
            temp_path.replace(self.path)
        except BaseException:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise

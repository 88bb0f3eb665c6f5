# src/todo_keeper/storage/kv_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class StorageDecodeError(ValueError):
    """Persisted data exists but cannot be decoded. Fatal at startup."""


class JsonFileKeyValueStore:
    """
    File-backed key-value store: one JSON object of string values.

    - missing file reads as empty
    - each call reads/writes the whole file (no open handles kept)
    - writes go to a temp file and are moved into place with os.replace
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = self._path.read_text("utf-8")
        except UnicodeDecodeError as e:
            raise StorageDecodeError(f"storage file {self._path} is not valid UTF-8: {e}") from e
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageDecodeError(f"storage file {self._path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise StorageDecodeError(f"storage file {self._path} must hold a JSON object")
        return {str(k): v if isinstance(v, str) else json.dumps(v) for k, v in data.items()}

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        # ASCII-escaped JSON: lone surrogates in values survive as \udcxx escapes.
        payload = json.dumps(data, indent=2)
        try:
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        finally:
            with contextlib.suppress(FileNotFoundError):
                tmp.unlink()
        with contextlib.suppress(OSError):
            os.chmod(self._path, 0o600)

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)
        logger.debug("Stored key=%s bytes=%d in %s", key, len(value), self._path)

    def remove_item(self, key: str) -> None:
        data = self._read_all()
        if data.pop(key, None) is not None:
            self._write_all(data)

"""Durable key-value storage used for answers, scores and progress.

Values are strings, exactly like browser local storage: callers serialise
whole documents and write them back in one piece. ``JsonFileStore`` keeps all
keys in a single JSON document on disk; ``InMemoryStore`` is the drop-in used
by tests.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from threading import Lock

logger = logging.getLogger(__name__)


class LocalStore:
    """Interface for string key-value storage."""

    def get_item(self, key: str) -> str | None:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def read_json(self, key: str, default: object) -> object:
        """Return the decoded value at ``key`` or ``default`` if absent or unparseable."""
        raw = self.get_item(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Ignoring unparseable stored value for '%s'", key)
            return default

    def write_json(self, key: str, value: object) -> None:
        self.set_item(key, json.dumps(value))


class InMemoryStore(LocalStore):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStore(LocalStore):
    """Stores every key in one JSON object on disk.

    Each write rewrites the whole file through a temporary sibling so a crash
    never leaves a half-written document behind.
    """

    def __init__(self, file_path: Path) -> None:
        self._path = Path(file_path)
        self._lock = Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> str | None:
        with self._lock:
            value = self._read_document().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            document = self._read_document()
            document[key] = value
            self._write_document(document)

    def remove_item(self, key: str) -> None:
        with self._lock:
            document = self._read_document()
            if key in document:
                del document[key]
                self._write_document(document)

    def _read_document(self) -> dict[str, object]:
        if not self._path.exists():
            return {}
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable state file %s: %s", self._path, exc)
            return {}
        if not isinstance(document, dict):
            logger.warning("Ignoring state file %s: expected a JSON object", self._path)
            return {}
        return document

    def _write_document(self, document: dict[str, object]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._path.with_name(self._path.name + ".tmp")
        temp_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        os.replace(temp_path, self._path)

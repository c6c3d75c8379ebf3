import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

STORAGE_PATH = Path.home() / ".local" / "share" / "ccoi2026" / "storage.json"


class KeyValueStore(Protocol):
    """String key-value storage for client-side state."""

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def delete(self, key: str) -> None: ...


class MemoryStore:
    """In-memory store, lives as long as the app session."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """Store persisted as a single JSON object on disk."""

    def __init__(self, path: Path | None = None):
        self.path = path or STORAGE_PATH
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._data: dict[str, str] = {}
        self._load()

    def _load(self):
        if not self.path.exists():
            return
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Could not load storage file %s: %s", self.path, exc)
            return
        if not isinstance(data, dict):
            logger.warning("Ignoring storage file %s: not a JSON object", self.path)
            return
        self._data = {str(k): str(v) for k, v in data.items()}

    def _save(self):
        """Persist via atomic temp-file swap."""
        tmp_path = self.path.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, sort_keys=True)
        tmp_path.replace(self.path)

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save()

    def delete(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._save()

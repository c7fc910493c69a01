"""Key-value persistence port.

Every collection is stored as one JSON-serializable value under its own key.
Reads of a missing or corrupt key return the caller's default and never raise;
writes replace the whole value.

Two implementations:
  * InMemoryStore - values kept as JSON text in a dict (tests, fakes).
  * JsonFileStore - one <key>.json file per key in a data directory, written atomically.
"""
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)


class KeyValueStore:
    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def put(self, key: str, value: Any) -> None:
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    def __init__(self, initial: Dict[str, Any] = None):
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.put(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt value under key {key}: {e}")
            return default

    def put(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value, ensure_ascii=False)

    def put_raw(self, key: str, raw: str) -> None:
        """Store text as-is (lets tests simulate corrupt persisted values)."""
        self._data[key] = raw


class JsonFileStore(KeyValueStore):
    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def path_for(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get(self, key: str, default: Any = None) -> Any:
        path = self.path_for(key)
        if not path.exists():
            return default
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Invalid JSON in {path.name}: {e}")
            return default
        except OSError as e:
            logger.error(f"Error reading {path.name}: {e}")
            return default

    def put(self, key: str, value: Any) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        target = self.path_for(key)
        fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{key}_", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(value, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, target)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)


__all__ = ['KeyValueStore', 'InMemoryStore', 'JsonFileStore']

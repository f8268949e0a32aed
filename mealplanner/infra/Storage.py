"""Key-value persistence for whole entity collections.

StorageManager is the only seam the repositories talk to. It turns a list of
entities into JSON text and back, and hands the text to a backend that knows
where to keep it:

  - InMemoryBackend: a dict, used by tests and throwaway sessions.
  - JsonFileBackend: one <key>.json file per key inside a data directory,
    written atomically so a failed write leaves the previous file intact.

Errors raised here (EncodeFailure, DecodeFailure, SaveFailure, FetchFailure)
are propagated unchanged by every caller.
"""
import json
import logging
import os
import shutil
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from mealplanner.infra.paths import DATA_DIR, data_file
from mealplanner.utilities.exceptions import DecodeFailure, EncodeFailure, FetchFailure, SaveFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


class KeyValueBackend(ABC):
    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the text stored under key, or None when the key is absent."""

    @abstractmethod
    def write(self, key: str, text: str) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...


class InMemoryBackend(KeyValueBackend):
    def __init__(self):
        self._data: Dict[str, str] = {}

    def read(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def write(self, key: str, text: str) -> None:
        self._data[key] = text

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileBackend(KeyValueBackend):
    def __init__(self, data_dir: Optional[Path] = None):
        self.data_dir = Path(data_dir or DATA_DIR)

    def read(self, key: str) -> Optional[str]:
        path = data_file(key, self.data_dir)
        if not path.exists():
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return f.read()
        except UnicodeDecodeError as e:
            logger.error(f"Stored data in {path} is not valid UTF-8: {e}")
            raise DecodeFailure(f"Could not decode data for '{key}'", key=key) from e
        except OSError as e:
            logger.error(f"Could not read {path}: {e}")
            raise FetchFailure(f"Could not read stored data for '{key}'", key=key) from e

    def write(self, key: str, text: str) -> None:
        path = data_file(key, self.data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.data_dir), prefix=f".{key}_", suffix=".json")
        except OSError as e:
            logger.error(f"Could not prepare write for {path}: {e}")
            raise SaveFailure(f"Could not save data for '{key}'", key=key) from e
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(text)
            shutil.move(tmp_path, str(path))
        except OSError as e:
            logger.error(f"Could not write {path}: {e}")
            raise SaveFailure(f"Could not save data for '{key}'", key=key) from e
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)

    def remove(self, key: str) -> None:
        path = data_file(key, self.data_dir)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Could not remove {path}: {e}")
            raise SaveFailure(f"Could not remove data for '{key}'", key=key) from e


class StorageManager:
    """Encode/decode entity collections under fixed keys.

    Entities are expected to expose ``to_dict()``; decoding goes through a
    factory such as ``Meal.from_dict``.
    """

    def __init__(self, backend: Optional[KeyValueBackend] = None):
        self.backend = backend if backend is not None else JsonFileBackend()

    def save(self, items: Iterable, key: str) -> None:
        try:
            text = json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False)
        except (TypeError, ValueError, AttributeError) as e:
            logger.error(f"Encoding failed for '{key}': {e}")
            raise EncodeFailure(f"Could not encode data for '{key}'", key=key) from e
        self.backend.write(key, text)

    def fetch(self, key: str, factory: Callable[[dict], T]) -> List[T]:
        """Decode the collection under key. Absent key -> empty list."""
        text = self.backend.read(key)
        if text is None:
            return []
        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"Stored data for '{key}' is not valid JSON: {e}")
            raise DecodeFailure(f"Could not decode data for '{key}'", key=key) from e
        if not isinstance(payload, list):
            logger.error(f"Stored data for '{key}' is not a collection")
            raise DecodeFailure(f"Could not decode data for '{key}'", key=key)
        try:
            return [factory(entry) for entry in payload]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Stored data for '{key}' has an unexpected shape: {e!r}")
            raise DecodeFailure(f"Could not decode data for '{key}'", key=key) from e

    def remove(self, key: str) -> None:
        self.backend.remove(key)

"""
Key-value persistence for client state (currently only the skills path).

Routes never touch the filesystem directly; they receive a KeyValueStore via
the `get_store` dependency, so tests can swap in MemoryStore.
"""

import hashlib
import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from fastapi import Depends

from mentor_api.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None if absent or unreadable."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        ...


class MemoryStore(KeyValueStore):
    def __init__(self):
        self._data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[Any]:
        raw = self._data.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Ignoring unreadable value for key %s", key)
            return None

    def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value, ensure_ascii=False)


class JsonFileStore(KeyValueStore):
    """One JSON file per key under `directory`, named by the SHA-256 of the key."""

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, key: str) -> str:
        filename = hashlib.sha256(key.encode("utf-8")).hexdigest()
        return os.path.join(self.directory, f"{filename}.json")

    def get(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not os.path.isfile(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable value for key %s: %s", key, e)
            return None

    def set(self, key: str, value: Any) -> None:
        os.makedirs(self.directory, exist_ok=True)
        path = self._path(key)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(value, f, ensure_ascii=False)
        # replace so readers never see a half-written file
        os.replace(tmp_path, path)


def get_store(settings: Settings = Depends(get_settings)) -> KeyValueStore:
    return JsonFileStore(settings.STORE_DIR)

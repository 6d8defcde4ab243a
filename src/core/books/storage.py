"""Key-value storage backends for the catalog."""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import redis
import structlog

from src.config import Settings

logger = structlog.get_logger(__name__)


class StorageError(Exception):
    """A backend could not read, write or remove a value."""


class StorageQuotaError(StorageError):
    """The value is larger than the backend is allowed to hold."""


class StorageBackend(ABC):
    """String key-value storage with localStorage-style semantics."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is not an error."""
        pass


class MemoryStorage(StorageBackend):
    """Dict-backed storage, lost when the process exits."""

    def __init__(self, quota: Optional[int] = None) -> None:
        self._items: dict[str, str] = {}
        self.quota = quota  # max characters per value

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota is not None and len(value) > self.quota:
            raise StorageQuotaError(
                f"Value for '{key}' is {len(value)} characters, quota is {self.quota}"
            )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileStorage(StorageBackend):
    """One ``<key>.json`` file per key inside a data directory."""

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            tmp.write_text(value, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}") from e

    def remove_item(self, key: str) -> None:
        path = self._path(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageError(f"Failed to remove {path}: {e}") from e


class RedisStorage(StorageBackend):
    """Redis-backed storage, one Redis string per key."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> "RedisStorage":
        client = redis.Redis.from_url(url, encoding="utf-8", decode_responses=True)
        logger.info("Redis storage configured", url=url)
        return cls(client)

    def get_item(self, key: str) -> Optional[str]:
        try:
            return self._client.get(key)
        except redis.RedisError as e:
            raise StorageError(f"Redis get failed for '{key}': {e}") from e

    def set_item(self, key: str, value: str) -> None:
        try:
            self._client.set(key, value)
        except redis.RedisError as e:
            raise StorageError(f"Redis set failed for '{key}': {e}") from e

    def remove_item(self, key: str) -> None:
        try:
            self._client.delete(key)
        except redis.RedisError as e:
            raise StorageError(f"Redis delete failed for '{key}': {e}") from e


def create_storage(settings: Settings) -> StorageBackend:
    """Build the backend selected by ``settings.storage_backend``."""
    if settings.storage_backend == "memory":
        return MemoryStorage()
    if settings.storage_backend == "redis":
        return RedisStorage.from_url(settings.redis_url)
    return FileStorage(settings.data_dir)

"""Tests for storage backends."""

import pytest
import redis

from src.config import Settings
from src.core.books.storage import (
    FileStorage,
    MemoryStorage,
    RedisStorage,
    StorageError,
    StorageQuotaError,
    create_storage,
)


class FakeRedis:
    """Minimal stand-in for a redis client."""

    def __init__(self, fail: bool = False) -> None:
        self.data: dict[str, str] = {}
        self.fail = fail

    def _check(self):
        if self.fail:
            raise redis.ConnectionError("connection refused")

    def get(self, key):
        self._check()
        return self.data.get(key)

    def set(self, key, value):
        self._check()
        self.data[key] = value

    def delete(self, key):
        self._check()
        self.data.pop(key, None)


def test_memory_storage_roundtrip():
    """Test set, get and remove on the memory backend."""
    storage = MemoryStorage()
    assert storage.get_item("k") is None
    storage.set_item("k", "[]")
    assert storage.get_item("k") == "[]"
    storage.remove_item("k")
    storage.remove_item("k")
    assert storage.get_item("k") is None


def test_memory_storage_quota():
    """Test values over the quota are rejected."""
    storage = MemoryStorage(quota=5)
    storage.set_item("k", "12345")
    with pytest.raises(StorageQuotaError):
        storage.set_item("k", "123456")
    assert storage.get_item("k") == "12345"


def test_file_storage_roundtrip(tmp_path):
    """Test the file backend writes one JSON file per key."""
    storage = FileStorage(tmp_path / "data")
    assert storage.get_item("books") is None

    storage.set_item("books", '[{"id": "1"}]')
    assert (tmp_path / "data" / "books.json").read_text(encoding="utf-8") == '[{"id": "1"}]'
    assert storage.get_item("books") == '[{"id": "1"}]'

    storage.remove_item("books")
    storage.remove_item("books")
    assert storage.get_item("books") is None


def test_file_storage_write_failure(tmp_path):
    """Test an unwritable data directory raises StorageError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    storage = FileStorage(blocker / "data")
    with pytest.raises(StorageError):
        storage.set_item("books", "[]")


def test_redis_storage_roundtrip():
    """Test the redis backend maps onto get/set/delete."""
    client = FakeRedis()
    storage = RedisStorage(client)
    storage.set_item("books", "[]")
    assert client.data == {"books": "[]"}
    assert storage.get_item("books") == "[]"
    storage.remove_item("books")
    assert storage.get_item("books") is None


def test_redis_storage_errors_are_wrapped():
    """Test redis errors surface as StorageError."""
    storage = RedisStorage(FakeRedis(fail=True))
    with pytest.raises(StorageError):
        storage.get_item("books")
    with pytest.raises(StorageError):
        storage.set_item("books", "[]")
    with pytest.raises(StorageError):
        storage.remove_item("books")


def test_create_storage_selects_backend(tmp_path):
    """Test the configured backend is built."""
    assert isinstance(create_storage(Settings(storage_backend="memory")), MemoryStorage)

    file_storage = create_storage(Settings(storage_backend="file", data_dir=tmp_path))
    assert isinstance(file_storage, FileStorage)
    assert file_storage.data_dir == tmp_path

    redis_storage = create_storage(
        Settings(storage_backend="redis", redis_url="redis://localhost:6379/0")
    )
    assert isinstance(redis_storage, RedisStorage)

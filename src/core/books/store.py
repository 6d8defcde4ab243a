"""Persistent book collection stored under a single key."""

import json

import structlog
from pydantic import TypeAdapter, ValidationError

from src.api.schemas.books import BookRecord
from src.config import get_settings
from src.core.books.storage import StorageBackend, StorageError, create_storage

logger = structlog.get_logger(__name__)

DEFAULT_STORAGE_KEY = "bookExchange_books"

_records_adapter = TypeAdapter(list[BookRecord])


class BookStore:
    """The whole catalog, serialized as one JSON array under one key.

    Every call reads or writes the full collection. Failures are logged and
    reported through the return value; nothing here raises to the caller.
    """

    def __init__(self, backend: StorageBackend, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._backend = backend
        self.key = key

    def is_available(self) -> bool:
        """Check that the backend answers a read."""
        try:
            self._backend.get_item(self.key)
            return True
        except StorageError as e:
            logger.warning("Book storage unavailable", key=self.key, error=str(e))
            return False

    def read(self) -> list[BookRecord]:
        """Load all records, or an empty list if absent or unreadable."""
        try:
            raw = self._backend.get_item(self.key)
            if not raw:
                return []
            return _records_adapter.validate_json(raw)
        except (StorageError, ValidationError) as e:
            logger.error("Failed to read books", key=self.key, error=str(e))
            return []

    def write(self, records: list[BookRecord]) -> bool:
        """Replace the stored collection. Returns False if it could not be saved."""
        try:
            payload = json.dumps([r.to_storage() for r in records], ensure_ascii=False)
            self._backend.set_item(self.key, payload)
            return True
        except StorageError as e:
            logger.error("Failed to save books", key=self.key, count=len(records), error=str(e))
            return False

    def clear(self) -> bool:
        """Remove the stored collection entirely."""
        try:
            self._backend.remove_item(self.key)
            return True
        except StorageError as e:
            logger.error("Failed to clear books", key=self.key, error=str(e))
            return False


# Singleton instance
_store: BookStore | None = None


def get_book_store() -> BookStore:
    """Get or create the book store singleton."""
    global _store
    if _store is None:
        settings = get_settings()
        _store = BookStore(create_storage(settings), key=settings.storage_key)
    return _store

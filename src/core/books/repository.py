"""Catalog operations on top of the book store."""

import json
import random
import string
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Hashable, Mapping, Optional, Union

import structlog

from src.api.schemas.books import BookRecord, BookStats, NewBook
from src.core.books.store import BookStore, get_book_store

logger = structlog.get_logger(__name__)

REQUIRED_FIELDS = ("title", "author", "uploader", "contact")

_BASE36 = string.digits + string.ascii_lowercase


def new_book_id() -> str:
    """Generate a collision-resistant record id."""
    return uuid.uuid4().hex


def legacy_book_id() -> str:
    """Generate an id in the old ``<epoch ms><9 base36 chars>`` format."""
    suffix = "".join(random.choices(_BASE36, k=9))
    return f"{int(time.time() * 1000)}{suffix}"


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _searchable(value: Any) -> str:
    # imported records may hold non-string values; those never match
    return value.lower() if isinstance(value, str) else ""


def _uploader_key(value: Any) -> Hashable:
    if isinstance(value, str):
        return value
    return ("json", json.dumps(value, sort_keys=True))


class BookRepository:
    """Add, delete, search and count books."""

    def __init__(
        self,
        store: BookStore,
        id_factory: Callable[[], str] = new_book_id,
    ) -> None:
        self.store = store
        self._id_factory = id_factory

    def get_all(self) -> list[BookRecord]:
        """Return every record in insertion order."""
        return self.store.read()

    def add(self, book: Union[NewBook, Mapping, None]) -> bool:
        """
        List a new book.

        Args:
            book: Title, author, uploader and contact, all non-empty

        Returns:
            True if the book was validated and saved
        """
        return self.create(book) is not None

    def create(self, book: Union[NewBook, Mapping, None]) -> Optional[BookRecord]:
        """Like ``add``, but return the saved record, or None on failure."""
        if book is None:
            logger.error("Book data incomplete", missing=list(REQUIRED_FIELDS))
            return None

        fields = book.model_dump() if isinstance(book, NewBook) else dict(book)
        missing = [name for name in REQUIRED_FIELDS if not fields.get(name)]
        if missing:
            logger.error("Book data incomplete", missing=missing)
            return None

        record = BookRecord(
            id=self._id_factory(),
            title=fields["title"],
            author=fields["author"],
            uploader=fields["uploader"],
            contact=fields["contact"],
            created_at=utc_now_iso(),
        )

        books = self.store.read()
        books.append(record)
        if not self.store.write(books):
            return None

        logger.info("Book added", book_id=record.id, title=record.title)
        return record

    def delete_by_id(self, book_id: str) -> bool:
        """Delete the record with this id. Returns False if none matched."""
        books = self.store.read()
        remaining = [b for b in books if b.id != book_id]

        if len(remaining) == len(books):
            logger.warning("Book not found for deletion", book_id=book_id)
            return False

        return self.store.write(remaining)

    def search(self, keyword: Optional[str]) -> list[BookRecord]:
        """
        Case-insensitive substring search over title, author and uploader.

        A blank keyword returns the whole collection. Contact info is never
        searched. Results keep collection order.
        """
        books = self.store.read()
        if not keyword or not keyword.strip():
            return books

        needle = keyword.lower()
        return [
            b
            for b in books
            if needle in _searchable(b.title)
            or needle in _searchable(b.author)
            or needle in _searchable(b.uploader)
        ]

    def get_stats(self) -> BookStats:
        """Count books and distinct uploaders (exact, case-sensitive match)."""
        books = self.store.read()
        uploaders = {_uploader_key(b.uploader) for b in books}
        return BookStats(total_books=len(books), total_uploaders=len(uploaders))

    def clear_all(self) -> bool:
        """Remove every book."""
        return self.store.clear()


# Singleton instance
_repository: BookRepository | None = None


def get_book_repository() -> BookRepository:
    """Get or create the book repository singleton."""
    global _repository
    if _repository is None:
        _repository = BookRepository(get_book_store())
    return _repository

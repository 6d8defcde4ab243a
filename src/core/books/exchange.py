"""JSON backup export and merge-by-id import."""

import asyncio
import json
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Protocol, Union

import structlog
from pydantic import ValidationError

from src.api.schemas.books import BookRecord, ImportResult
from src.core.books.store import BookStore, get_book_store

logger = structlog.get_logger(__name__)


class ExchangeError(Exception):
    """Base class for import failures."""


class ImportReadError(ExchangeError):
    """The import file could not be read as text."""


class InvalidImportFormatError(ExchangeError):
    """The import file is not a JSON array of records."""


class ImportSaveError(ExchangeError):
    """The merged collection could not be saved."""


class AsyncReadable(Protocol):
    """Anything with an awaitable ``read()``, e.g. a FastAPI ``UploadFile``."""

    async def read(self) -> Union[bytes, str]: ...


ImportSource = Union[str, Path, AsyncReadable]


@dataclass
class ExportFile:
    """A serialized backup ready to be offered as a download."""

    filename: str
    content: str
    media_type: str = "application/json"


def backup_filename(day: date | None = None) -> str:
    """Backup file name for the given day, defaulting to today in UTC."""
    day = day or datetime.now(timezone.utc).date()
    return f"books_backup_{day.isoformat()}.json"


class BookExchange:
    """Moves the catalog in and out of JSON backup files."""

    def __init__(self, store: BookStore) -> None:
        self.store = store

    def export(self) -> ExportFile:
        """Serialize the whole catalog as pretty-printed JSON."""
        books = self.store.read()
        content = json.dumps([b.to_storage() for b in books], ensure_ascii=False, indent=2)
        return ExportFile(filename=backup_filename(), content=content)

    def export_to(self, directory: Path) -> Path:
        """Write a backup file into ``directory`` and return its path."""
        export = self.export()
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / export.filename
        path.write_text(export.content, encoding="utf-8")
        logger.info("Books exported", path=str(path))
        return path

    async def import_data(self, file: ImportSource) -> ImportResult:
        """
        Merge records from a backup file into the catalog.

        Existing records stay first; incoming records whose id is already
        present are dropped, the rest are appended in file order.

        Args:
            file: Path to a JSON file, or an object with an async ``read()``

        Returns:
            Count of newly imported records and the resulting total

        Raises:
            ImportReadError: The file could not be read or decoded
            InvalidImportFormatError: The content is not a JSON array of records
            ImportSaveError: The merged catalog could not be written
        """
        text = await self._read_text(file)

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidImportFormatError(f"File is not valid JSON: {e}") from e

        if not isinstance(payload, list):
            raise InvalidImportFormatError("File format error: data is not an array")

        try:
            incoming = [BookRecord.model_validate(item) for item in payload]
        except ValidationError as e:
            raise InvalidImportFormatError(f"File contains invalid records: {e}") from e

        existing = self.store.read()
        existing_ids = {b.id for b in existing}
        new_books = [b for b in incoming if b.id not in existing_ids]
        merged = existing + new_books

        if not self.store.write(merged):
            raise ImportSaveError("Failed to save imported books")

        logger.info(
            "Books imported",
            received=len(incoming),
            imported=len(new_books),
            total=len(merged),
        )
        return ImportResult(imported=len(new_books), total=len(merged))

    @staticmethod
    async def _read_text(file: ImportSource) -> str:
        try:
            if isinstance(file, (str, Path)):
                return await asyncio.to_thread(Path(file).read_text, encoding="utf-8")
            data = await file.read()
            return data.decode("utf-8") if isinstance(data, bytes) else data
        except (OSError, UnicodeDecodeError) as e:
            raise ImportReadError(f"Failed to read file: {e}") from e


# Singleton instance
_exchange: BookExchange | None = None


def get_book_exchange() -> BookExchange:
    """Get or create the book exchange singleton."""
    global _exchange
    if _exchange is None:
        _exchange = BookExchange(get_book_store())
    return _exchange

"""Book record schemas."""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookRecord(BaseModel):
    """A book offered for exchange.

    Only ``id`` is checked on every stored record. Records created through
    the repository always carry the other fields as strings; imported ones
    keep whatever values the file had, unknown keys included.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)

    id: str = Field(description="Unique record identifier")
    title: Any = Field(default=None, description="Book title")
    author: Any = Field(default=None, description="Book author")
    uploader: Any = Field(default=None, description="Person offering the book")
    contact: Any = Field(default=None, description="Free-form contact info (email, phone, handle)")
    created_at: Any = Field(
        default=None, alias="createdAt", description="ISO-8601 creation timestamp"
    )

    def to_storage(self) -> dict:
        """Serialize with camelCase keys, omitting fields the record never had."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class NewBook(BaseModel):
    """Fields supplied by the caller when listing a book.

    Presence is checked by the repository, not here, so an incomplete
    listing reaches it and is rejected with a plain ``False``.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    uploader: Optional[str] = None
    contact: Optional[str] = None


class BookStats(BaseModel):
    """Aggregate catalog counts."""

    model_config = ConfigDict(populate_by_name=True)

    total_books: int = Field(alias="totalBooks")
    total_uploaders: int = Field(alias="totalUploaders")


class ImportResult(BaseModel):
    """Outcome of merging an imported file into the catalog."""

    success: Literal[True] = True
    imported: int = Field(description="Records newly added by this import")
    total: int = Field(description="Catalog size after the merge")


class DeleteResponse(BaseModel):
    status: str
    book_id: str

"""Book catalog API endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, HTTPException, Query, Response, UploadFile

from src.api.schemas.books import BookRecord, BookStats, DeleteResponse, ImportResult, NewBook
from src.core.books.exchange import (
    BookExchange,
    ImportReadError,
    ImportSaveError,
    InvalidImportFormatError,
    get_book_exchange,
)
from src.core.books.repository import BookRepository, get_book_repository

router = APIRouter(prefix="/v1/books", tags=["Books"])


# --- Listing & Search ---


@router.get("", response_model=list[BookRecord])
async def list_books(
    repository: Annotated[BookRepository, Depends(get_book_repository)],
    q: Optional[str] = Query(default=None, description="Search title, author or uploader"),
) -> list[BookRecord]:
    """List all books, or those matching a keyword."""
    return repository.search(q)


@router.get("/stats", response_model=BookStats)
async def get_stats(
    repository: Annotated[BookRepository, Depends(get_book_repository)],
) -> BookStats:
    """Get total book and uploader counts."""
    return repository.get_stats()


# --- Book Management ---


@router.post("", status_code=201, response_model=BookRecord)
async def add_book(
    book: NewBook,
    repository: Annotated[BookRepository, Depends(get_book_repository)],
) -> BookRecord:
    """
    List a new book.

    Title, author, uploader and contact are all required.
    """
    missing = [name for name, value in book.model_dump().items() if not value]
    if missing:
        raise HTTPException(
            status_code=400,
            detail=f"Missing required fields: {', '.join(missing)}",
        )

    record = repository.create(book)
    if record is None:
        raise HTTPException(status_code=500, detail="Failed to save book")
    return record


@router.delete("/{book_id}", response_model=DeleteResponse)
async def delete_book(
    book_id: str,
    repository: Annotated[BookRepository, Depends(get_book_repository)],
) -> DeleteResponse:
    """Delete a book by ID."""
    if not repository.delete_by_id(book_id):
        raise HTTPException(status_code=404, detail="Book not found")
    return DeleteResponse(status="deleted", book_id=book_id)


@router.delete("")
async def clear_books(
    repository: Annotated[BookRepository, Depends(get_book_repository)],
) -> dict:
    """Delete every book in the catalog."""
    if not repository.clear_all():
        raise HTTPException(status_code=500, detail="Failed to clear books")
    return {"status": "cleared"}


# --- Backup ---


@router.get("/export")
async def export_books(
    exchange: Annotated[BookExchange, Depends(get_book_exchange)],
) -> Response:
    """Download the full catalog as a JSON backup."""
    export = exchange.export()
    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{export.filename}"',
        },
    )


@router.post("/import", response_model=ImportResult)
async def import_books(
    exchange: Annotated[BookExchange, Depends(get_book_exchange)],
    file: UploadFile = File(..., description="JSON backup produced by /export"),
) -> ImportResult:
    """
    Import books from a JSON backup.

    Records whose ID already exists in the catalog are skipped.
    """
    try:
        return await exchange.import_data(file)
    except (ImportReadError, InvalidImportFormatError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ImportSaveError as e:
        raise HTTPException(status_code=500, detail=str(e))

"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from src.config import get_settings
from src.core.books.store import BookStore, get_book_store

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
    store: Annotated[BookStore, Depends(get_book_store)],
) -> dict:
    """Readiness check - verifies the book storage backend is reachable."""
    settings = get_settings()
    if not store.is_available():
        raise HTTPException(
            status_code=503,
            detail=f"Storage backend '{settings.storage_backend}' is unavailable",
        )
    return {
        "status": "ready",
        "storage_backend": settings.storage_backend,
        "storage_key": store.key,
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - verifies service is running."""
    return {"status": "alive"}

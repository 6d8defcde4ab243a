"""API schemas."""

from src.api.schemas.books import BookRecord, BookStats, DeleteResponse, ImportResult, NewBook

__all__ = ["BookRecord", "BookStats", "DeleteResponse", "ImportResult", "NewBook"]

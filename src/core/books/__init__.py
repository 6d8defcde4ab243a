"""Book catalog module."""

from src.core.books.exchange import BookExchange, get_book_exchange
from src.core.books.repository import BookRepository, get_book_repository
from src.core.books.samples import seed_sample_books
from src.core.books.store import BookStore, get_book_store

__all__ = [
    "BookExchange",
    "BookRepository",
    "BookStore",
    "get_book_exchange",
    "get_book_repository",
    "get_book_store",
    "seed_sample_books",
]

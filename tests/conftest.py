"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("SEED_SAMPLES", "false")

import pytest
from fastapi.testclient import TestClient

from src.core.books.exchange import BookExchange, get_book_exchange
from src.core.books.repository import BookRepository, get_book_repository
from src.core.books.storage import MemoryStorage
from src.core.books.store import BookStore, get_book_store
from src.main import app


@pytest.fixture
def backend():
    """Fresh in-memory storage backend."""
    return MemoryStorage()


@pytest.fixture
def store(backend):
    return BookStore(backend)


@pytest.fixture
def repository(store):
    return BookRepository(store)


@pytest.fixture
def exchange(store):
    return BookExchange(store)


@pytest.fixture
def client(store, repository, exchange):
    """Create a test client wired to an isolated in-memory catalog."""
    app.dependency_overrides[get_book_store] = lambda: store
    app.dependency_overrides[get_book_repository] = lambda: repository
    app.dependency_overrides[get_book_exchange] = lambda: exchange
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sample_book():
    """A complete listing for add()."""
    return {
        "title": "The Left Hand of Darkness",
        "author": "Ursula K. Le Guin",
        "uploader": "Mira",
        "contact": "mira@example.com",
    }

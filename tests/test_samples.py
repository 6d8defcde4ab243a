"""Tests for first-run sample data."""

from src.core.books.samples import SAMPLE_BOOKS, seed_sample_books


def test_seeds_empty_catalog(store):
    assert seed_sample_books(store)

    books = store.read()
    assert [b.id for b in books] == [f"sample{i}" for i in range(1, 7)]
    assert books[0].title == "三体"
    assert len({b.created_at for b in books}) == 1
    assert all(b.created_at for b in books)


def test_does_not_touch_existing_catalog(repository, store, sample_book):
    """Test seeding is skipped once the catalog has any record."""
    repository.add(sample_book)
    assert seed_sample_books(store) is False
    assert len(store.read()) == 1


def test_seed_twice_is_idempotent(store):
    seed_sample_books(store)
    seed_sample_books(store)
    assert len(store.read()) == len(SAMPLE_BOOKS)


def test_sample_stats(repository, store):
    seed_sample_books(store)
    stats = repository.get_stats()
    assert stats.total_books == 6
    assert stats.total_uploaders == 6

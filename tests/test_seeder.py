"""
Tests for the Sample Data Seeder

The seeder must be idempotent: a second run over the same list inserts
nothing. A failure on one entry must not stop the others.
"""

import pytest

from catalog.exceptions import CatalogConnectionError, StorageError
from catalog.models import Book
from catalog.services.seeder import (
    MYSQL_YEAR_RANGE,
    SEED_BOOKS,
    seed,
    years_outside_mysql_range,
)


class FakeStore:
    """In-memory BookStore; optionally fails to save chosen titles."""

    def __init__(self, failing_titles=()):
        self.books: list[Book] = []
        self.failing_titles = set(failing_titles)
        self._next_id = 1

    def get_by_id(self, book_id):
        return next((book for book in self.books if book.id == book_id), None)

    def get_all(self):
        return list(self.books)

    def get_by_author(self, author):
        return [book for book in self.books if book.author == author]

    def get_by_category(self, category):
        return [book for book in self.books if book.category == category]

    def save(self, book):
        if book.title in self.failing_titles:
            raise StorageError(f"Failed to insert book: {book.title}")
        book.id = self._next_id
        self._next_id += 1
        self.books.append(book)

    def delete(self, book):
        self.books.remove(book)
        book.id = None


class TestSeedList:
    def test_seed_list_has_fifty_entries(self):
        assert len(SEED_BOOKS) == 50

    def test_seed_list_has_no_duplicate_title_author_pairs(self):
        pairs = {(title, author) for title, author, *_ in SEED_BOOKS}

        assert len(pairs) == len(SEED_BOOKS)

    def test_years_outside_mysql_range(self):
        too_old = years_outside_mysql_range()

        assert len(too_old) == 16
        assert "Das Kapital" in too_old
        assert "Hamlet" in too_old
        assert "1984" not in too_old
        # unknown year is storable everywhere
        assert "Die Odyssee" not in too_old

    def test_mysql_year_range_bounds(self):
        entries = [
            ("A", "X", "C", MYSQL_YEAR_RANGE[0], None),
            ("B", "X", "C", MYSQL_YEAR_RANGE[1], None),
            ("D", "X", "C", MYSQL_YEAR_RANGE[0] - 1, None),
            ("E", "X", "C", MYSQL_YEAR_RANGE[1] + 1, None),
        ]

        assert years_outside_mysql_range(entries) == ["D", "E"]


class TestSeedDatabase:
    def test_first_run_inserts_everything(self, repository):
        report = seed(repository)

        assert len(report.inserted) == 50
        assert report.skipped == []
        assert report.failed == {}
        assert repository.count() == 50

    def test_second_run_inserts_nothing(self, repository):
        seed(repository)
        count_after_first = repository.count()

        report = seed(repository)

        assert report.inserted == []
        assert len(report.skipped) == 50
        assert repository.count() == count_after_first

    def test_existing_entries_are_skipped(self, repository, sample_book):
        report = seed(repository)

        assert report.skipped == ["1984"]
        assert len(report.inserted) == 49
        assert len(repository.get_by_author("George Orwell")) == 1

    def test_same_title_other_author_is_not_a_duplicate(self, repository):
        repository.save(Book("Dune", "Someone Else", "Science Fiction"))

        report = seed(repository)

        assert "Dune" in report.inserted
        assert repository.count() == 51

    def test_seeded_values_match_list(self, repository):
        seed(repository)

        odyssey = repository.get_by_author("Homer")[0]
        assert odyssey.title == "Die Odyssee"
        assert odyssey.year is None
        assert odyssey.publisher == "Antike Überlieferung"


class TestSeedFailures:
    def test_failure_on_one_entry_continues(self):
        store = FakeStore(failing_titles={"Clean Code"})

        report = seed(store)

        assert "Clean Code" in report.failed
        assert len(report.inserted) == 49
        assert report.total == 50

    def test_failed_entry_is_retried_on_next_run(self):
        store = FakeStore(failing_titles={"Clean Code"})
        seed(store)
        store.failing_titles.clear()

        report = seed(store)

        assert report.inserted == ["Clean Code"]

    def test_connection_failure_aborts(self):
        class UnreachableStore(FakeStore):
            def get_all(self):
                raise CatalogConnectionError("Could not connect to the database")

        with pytest.raises(CatalogConnectionError):
            seed(UnreachableStore())

    def test_custom_entries(self):
        store = FakeStore()

        report = seed(store, [("Dune", "Frank Herbert", "Science Fiction", 1965, None)])

        assert report.inserted == ["Dune"]
        assert store.books[0].year == 1965

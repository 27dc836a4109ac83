"""
Tests for FilterResolver

Only one filter is ever applied. When both are present the category
filter wins and the author filter is ignored; the result must never be
the intersection of the two.
"""

from unittest.mock import create_autospec

import pytest

from catalog.services import BookRepository, FilterResolver


@pytest.fixture
def store():
    return create_autospec(BookRepository, instance=True)


class TestFinderSelection:
    def test_no_filters_returns_all(self, store):
        result = FilterResolver(store).resolve()

        store.get_all.assert_called_once_with()
        store.get_by_author.assert_not_called()
        store.get_by_category.assert_not_called()
        assert result is store.get_all.return_value

    def test_author_only(self, store):
        FilterResolver(store).resolve(author_filter="George Orwell")

        store.get_by_author.assert_called_once_with("George Orwell")
        store.get_all.assert_not_called()

    def test_category_only(self, store):
        FilterResolver(store).resolve(category_filter="Fantasy")

        store.get_by_category.assert_called_once_with("Fantasy")
        store.get_all.assert_not_called()

    def test_category_takes_precedence_over_author(self, store):
        FilterResolver(store).resolve(author_filter="Orwell", category_filter="Fantasy")

        store.get_by_category.assert_called_once_with("Fantasy")
        store.get_by_author.assert_not_called()

    @pytest.mark.parametrize("blank", ["", "   ", None])
    def test_blank_filters_count_as_absent(self, store, blank):
        FilterResolver(store).resolve(author_filter=blank, category_filter=blank)

        store.get_all.assert_called_once_with()

    def test_blank_category_falls_back_to_author(self, store):
        FilterResolver(store).resolve(author_filter="George Orwell", category_filter=" ")

        store.get_by_author.assert_called_once_with("George Orwell")

    def test_filters_are_trimmed(self, store):
        FilterResolver(store).resolve(author_filter="  J.R.R. Tolkien  ")

        store.get_by_author.assert_called_once_with("J.R.R. Tolkien")


class TestAgainstDatabase:
    def test_both_filters_equal_category_only(self, repository, sample_books):
        resolver = FilterResolver(repository)

        combined = resolver.resolve(author_filter="Orwell", category_filter="Fantasy")

        assert combined == repository.get_by_category("Fantasy")
        assert len(combined) == 3

    def test_filters_are_not_intersected(self, repository, sample_books):
        resolver = FilterResolver(repository)

        result = resolver.resolve(author_filter="George Orwell", category_filter="Fantasy")

        assert all(book.author != "George Orwell" for book in result)
        assert result

    def test_no_filters_equals_get_all(self, repository, sample_books):
        assert FilterResolver(repository).resolve() == repository.get_all()

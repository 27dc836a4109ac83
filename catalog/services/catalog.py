"""
Book Catalog Service

The operations the web layer (or any other front end) calls:
add, edit, remove, get and list.

Submitted values are parsed with BookForm before anything touches the
database, so an empty title, author or category fails with
BookValidationError and no statement is sent.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from catalog.exceptions import BookValidationError
from catalog.models.book import Book
from catalog.schemas.book import BookForm
from catalog.services.filters import FilterResolver
from catalog.services.repository import BookStore

logger = logging.getLogger(__name__)


def _format_errors(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"])
        messages.append(f"{field}: {error['msg']}")
    return "; ".join(messages)


class BookCatalog:
    """
    Front-end facing catalog operations.

    Args:
        store: Where books are loaded from and saved to.
    """

    def __init__(self, store: BookStore) -> None:
        self._store = store
        self._filters = FilterResolver(store)

    def add(
        self,
        title: str,
        author: str,
        category: str,
        year: int | str | None = None,
        publisher: str | None = None,
    ) -> Book:
        """Create and save a new book. Returns it with its new id."""
        form = self._parse(title, author, category, year, publisher)
        book = Book(**form.model_dump())
        self._store.save(book)
        logger.info(f"Added book {book.id}: {book}")
        return book

    def edit(
        self,
        book_id: int,
        title: str,
        author: str,
        category: str,
        year: int | str | None = None,
        publisher: str | None = None,
    ) -> Book | None:
        """
        Replace every field of an existing book.

        Returns:
            The updated book, or None if no book has this id.
        """
        form = self._parse(title, author, category, year, publisher)
        book = self._store.get_by_id(book_id)
        if book is None:
            logger.info(f"Edit skipped, book {book_id} not found")
            return None

        for field, value in form.model_dump().items():
            setattr(book, field, value)
        self._store.save(book)
        logger.info(f"Updated book {book_id}")
        return book

    def remove(self, book_id: int) -> bool:
        """Delete a book. Returns False if no book has this id."""
        book = self._store.get_by_id(book_id)
        if book is None:
            logger.info(f"Remove skipped, book {book_id} not found")
            return False

        self._store.delete(book)
        logger.info(f"Removed book {book_id}")
        return True

    def get(self, book_id: int) -> Book | None:
        return self._store.get_by_id(book_id)

    def list(
        self,
        author_filter: str | None = None,
        category_filter: str | None = None,
    ) -> list[Book]:
        """List books, narrowed by at most one filter (category wins)."""
        return self._filters.resolve(author_filter, category_filter)

    @staticmethod
    def _parse(title, author, category, year, publisher) -> BookForm:
        try:
            return BookForm(
                title=title,
                author=author,
                category=category,
                year=year,
                publisher=publisher,
            )
        except ValidationError as exc:
            raise BookValidationError(_format_errors(exc)) from exc

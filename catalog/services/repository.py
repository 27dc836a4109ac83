"""
Book Repository

CRUD and finder operations for the books table.

Every statement is built with SQLAlchemy expressions, so user input is
always sent as a bound parameter and never pasted into SQL text.

Each call runs in its own engine.begin() block: one statement, committed
on success and rolled back on failure. A failed save or delete therefore
leaves the table exactly as it was.

Errors:
- CatalogConnectionError from the ConnectionProvider passes through.
- Any SQLAlchemyError raised while executing becomes StorageError.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.sql import Select

from catalog.database import ConnectionProvider
from catalog.exceptions import StorageError
from catalog.models.book import Book, books

logger = logging.getLogger(__name__)


class BookStore(Protocol):
    """The operations callers rely on; BookRepository implements them."""

    def get_by_id(self, book_id: int) -> Book | None: ...

    def get_all(self) -> list[Book]: ...

    def get_by_author(self, author: str) -> list[Book]: ...

    def get_by_category(self, category: str) -> list[Book]: ...

    def save(self, book: Book) -> None: ...

    def delete(self, book: Book) -> None: ...


class BookRepository:
    """
    Loads and stores Book values.

    Args:
        provider: Supplies the engine. Shared across repositories.
    """

    def __init__(self, provider: ConnectionProvider) -> None:
        self._provider = provider

    # -------------------------------------------------------------------------
    # Finders
    # -------------------------------------------------------------------------
    def get_by_id(self, book_id: int) -> Book | None:
        """Return the book with this primary key, or None."""
        stmt = select(books).where(books.c.id == book_id)
        with self._connection(f"load book {book_id}") as conn:
            row = conn.execute(stmt).mappings().first()
        return Book.from_row(row) if row is not None else None

    def get_all(self) -> list[Book]:
        """Return every book, ordered by id."""
        return self._fetch_all(select(books), "load books")

    def get_by_author(self, author: str) -> list[Book]:
        """Return books whose author equals `author` exactly (case-sensitive)."""
        stmt = select(books).where(books.c.author == author)
        return self._fetch_all(stmt, "load books by author")

    def get_by_category(self, category: str) -> list[Book]:
        """Return books whose category equals `category` exactly (case-sensitive)."""
        stmt = select(books).where(books.c.category == category)
        return self._fetch_all(stmt, "load books by category")

    def count(self) -> int:
        stmt = select(func.count()).select_from(books)
        with self._connection("count books") as conn:
            return conn.execute(stmt).scalar_one()

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------
    def save(self, book: Book) -> None:
        """
        Insert or update a book.

        A book without an id is inserted and receives the id generated by
        the database. A book with an id replaces every column of that row.
        Concurrent saves of the same id: the last one wins.

        Raises:
            BookValidationError: If a required field is empty. Nothing is sent.
            StorageError: If the statement fails. book.id is left unchanged.
        """
        book.validate()
        values = book.to_row()

        if book.id is None:
            with self._connection("insert book") as conn:
                result = conn.execute(insert(books).values(**values))
                new_id = result.inserted_primary_key[0]
            book.id = new_id
            logger.debug(f"Inserted book {new_id}: {book.title!r}")
            return

        stmt = update(books).where(books.c.id == book.id).values(**values)
        with self._connection(f"update book {book.id}") as conn:
            result = conn.execute(stmt)
        if result.rowcount == 0:
            logger.warning(f"Update of book {book.id} matched no row")
        else:
            logger.debug(f"Updated book {book.id}")

    def delete(self, book: Book) -> None:
        """
        Delete a book's row and clear its id.

        Does nothing if the book has no id. After deletion the instance is
        transient again: saving it inserts a new row with a new id.
        """
        if book.id is None:
            return

        stmt = delete(books).where(books.c.id == book.id)
        with self._connection(f"delete book {book.id}") as conn:
            conn.execute(stmt)
        logger.debug(f"Deleted book {book.id}")
        book.id = None

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _fetch_all(self, stmt: Select, action: str) -> list[Book]:
        with self._connection(action) as conn:
            rows = conn.execute(stmt.order_by(books.c.id)).mappings().all()
        return [Book.from_row(row) for row in rows]

    @contextmanager
    def _connection(self, action: str) -> Iterator[Connection]:
        """
        Open a transaction-scoped connection and translate failures.

        get_instance() is called outside the try block so that
        CatalogConnectionError reaches the caller untouched.
        """
        engine = self._provider.get_instance()
        try:
            with engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            reason = exc.orig if isinstance(exc, DBAPIError) and exc.orig else exc
            logger.error(f"Failed to {action}: {reason}")
            raise StorageError(f"Failed to {action}: {reason}") from exc

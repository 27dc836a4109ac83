"""
Book Model

The books table and the in-memory Book value it maps to.

The table is flat: no foreign keys, no timestamps. Its shape matches
the schema created by the initial Alembic revision:

    books(
      id        INTEGER PRIMARY KEY AUTO_INCREMENT,
      title     VARCHAR(255) NOT NULL,
      author    VARCHAR(255) NOT NULL,
      category  VARCHAR(255) NOT NULL,
      year      YEAR NULL,
      publisher VARCHAR(255) NULL
    )

Book is a plain dataclass, not an ORM-mapped class. Loading and saving
it is BookRepository's job; this module only converts between rows and
Book values.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Column, Integer, String, Table
from sqlalchemy.dialects import mysql

from catalog.database import metadata
from catalog.exceptions import BookValidationError

REQUIRED_FIELDS = ("title", "author", "category")
COLUMN_FIELDS = ("title", "author", "category", "year", "publisher")


def exact_match_string() -> String:
    """
    VARCHAR(255) compared byte for byte.

    MySQL's default utf8mb4 collations are case-insensitive, which would
    make 'tolkien' match 'Tolkien'. The binary collation is set on the
    column so filters behave the same on every server. SQLite compares
    with BINARY by default.
    """
    return String(255).with_variant(
        mysql.VARCHAR(255, collation="utf8mb4_bin"), "mysql"
    )


books = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("author", exact_match_string(), nullable=False),
    Column("category", exact_match_string(), nullable=False),
    # MySQL stores the publication year as YEAR; other backends as INTEGER
    Column("year", Integer().with_variant(mysql.YEAR(), "mysql"), nullable=True),
    Column("publisher", String(255), nullable=True),
    mysql_engine="InnoDB",
    mysql_charset="utf8mb4",
    # Never reuse the id of a deleted row, as MySQL AUTO_INCREMENT does
    sqlite_autoincrement=True,
)


@dataclass
class Book:
    """
    One catalog entry.

    id is None until the book has been saved, and again after it has
    been deleted. year and publisher are optional.

    Example:
        book = Book(
            title="1984",
            author="George Orwell",
            category="Dystopie",
            year=1949,
            publisher="Secker & Warburg",
        )
    """

    title: str
    author: str
    category: str
    year: int | None = None
    publisher: str | None = None
    id: int | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def validate(self) -> None:
        """
        Check that title, author and category are filled in.

        Raises:
            BookValidationError: If any required field is empty, blank or
                not a string.
        """
        not_text = [
            name for name in REQUIRED_FIELDS
            if getattr(self, name) is not None and not isinstance(getattr(self, name), str)
        ]
        if not_text:
            raise BookValidationError(
                f"Required fields must be text: {', '.join(not_text)}"
            )

        missing = [
            name for name in REQUIRED_FIELDS
            if not (getattr(self, name) or "").strip()
        ]
        if missing:
            raise BookValidationError(
                f"Required fields must not be empty: {', '.join(missing)}"
            )

    def to_row(self) -> dict[str, Any]:
        """Column values for INSERT/UPDATE (everything except id)."""
        return {name: getattr(self, name) for name in COLUMN_FIELDS}

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Book":
        """Build a Book from a column-name keyed row."""
        year = row["year"]
        return cls(
            id=row["id"],
            title=row["title"],
            author=row["author"],
            category=row["category"],
            year=int(year) if year is not None else None,
            publisher=row["publisher"],
        )

    def __str__(self) -> str:
        return f"{self.title} by {self.author}"

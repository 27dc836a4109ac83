"""
Models Package

Importing this package registers the books table on
catalog.database.metadata, which create_tables() and Alembic rely on.
"""

from catalog.models.book import Book, books

__all__ = [
    "Book",
    "books",
]

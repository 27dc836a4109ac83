"""
FastAPI Dependencies Module

Wires the process-wide ConnectionProvider into a BookRepository and a
BookCatalog for each request. Tests replace get_catalog through
app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Query

from catalog.database import get_connection_provider
from catalog.services.catalog import BookCatalog
from catalog.services.repository import BookRepository


def get_repository() -> BookRepository:
    """Repository on the shared connection provider."""
    return BookRepository(get_connection_provider())


def get_catalog(
    repository: Annotated[BookRepository, Depends(get_repository)],
) -> BookCatalog:
    return BookCatalog(repository)


Catalog = Annotated[BookCatalog, Depends(get_catalog)]


class BookFilterParams:
    """
    Optional list filters.

    Both are exact, case-sensitive matches. If both are given only the
    category filter is applied.

    Usage:
        GET /api/v1/books/?author=George%20Orwell
        GET /api/v1/books/?category=Fantasy
    """

    def __init__(
        self,
        author: str | None = Query(
            default=None,
            description="Exact author name",
            examples=["J.R.R. Tolkien"],
        ),
        category: str | None = Query(
            default=None,
            description="Exact category; takes precedence over author",
            examples=["Fantasy"],
        ),
    ) -> None:
        self.author = author
        self.category = category


BookFilters = Annotated[BookFilterParams, Depends()]

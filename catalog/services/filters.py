"""
Filter Resolution

Picks the one finder to run for the list view's author/category filters.

Only one filter is ever applied. When both are given, the category
filter wins and the author filter is ignored; the two are never
combined into an AND query.

    author   category   result
    ------   --------   ---------------------------
    -        -          store.get_all()
    x        -          store.get_by_author(x)
    -        y          store.get_by_category(y)
    x        y          store.get_by_category(y)
"""

import logging

from catalog.models.book import Book
from catalog.services.repository import BookStore

logger = logging.getLogger(__name__)


def _clean(value: str | None) -> str | None:
    """Trim a filter value; blank counts as absent."""
    if value is None:
        return None
    value = value.strip()
    return value or None


class FilterResolver:
    """Chooses between get_all, get_by_author and get_by_category."""

    def __init__(self, store: BookStore) -> None:
        self._store = store

    def resolve(
        self,
        author_filter: str | None = None,
        category_filter: str | None = None,
    ) -> list[Book]:
        author = _clean(author_filter)
        category = _clean(category_filter)

        if category is not None:
            if author is not None:
                logger.debug(
                    f"Category filter {category!r} takes precedence, "
                    f"ignoring author filter {author!r}"
                )
            return self._store.get_by_category(category)

        if author is not None:
            return self._store.get_by_author(author)

        return self._store.get_all()

"""
Pydantic Schemas Package

Request/response models for the HTTP layer and input parsing for
BookCatalog. Book itself (catalog.models) stays a plain dataclass.
"""

from catalog.schemas.book import BookForm, BookListResponse, BookResponse

__all__ = [
    "BookForm",
    "BookResponse",
    "BookListResponse",
]

"""
Services Package

Everything that works with books beyond the table definition:

- repository.py: BookRepository (CRUD and finders) and the BookStore protocol
- filters.py: FilterResolver, picks the finder for the list filters
- catalog.py: BookCatalog, add/edit/remove/get/list for front ends
- seeder.py: idempotent sample-data loader
"""

from catalog.services.catalog import BookCatalog
from catalog.services.filters import FilterResolver
from catalog.services.repository import BookRepository, BookStore

__all__ = [
    "BookCatalog",
    "BookRepository",
    "BookStore",
    "FilterResolver",
]

"""
Catalog Exceptions

Every error raised by the persistence layer derives from CatalogError,
so callers can catch the whole family in one place:

- CatalogConnectionError: the store cannot be reached or the connection
  parameters are wrong. Fatal for the current operation.
- BookValidationError: a required field is empty. Raised before any
  statement is sent.
- StorageError: a statement failed on an established connection. The
  store is left as it was.

None of them is retried.
"""


class CatalogError(Exception):
    """Base class for catalog errors."""


class CatalogConnectionError(CatalogError, ConnectionError):
    """The backing store could not be connected to."""


class BookValidationError(CatalogError, ValueError):
    """A book is missing a required value."""


class StorageError(CatalogError):
    """A statement against the backing store failed."""

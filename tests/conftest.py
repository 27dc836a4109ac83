"""
pytest Fixtures for WebBiblio Tests

Shared fixtures:
- provider: ConnectionProvider on a fresh in-memory SQLite database
- repository / catalog: services built on that provider
- client: FastAPI TestClient whose catalog uses the test database
- sample_book / sample_books: stored test data

We use SQLite in-memory for tests because it is fast, needs no server
and starts empty for every test. StaticPool keeps the single in-memory
connection alive; without it every new connection would see a new,
empty database.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from catalog.config import Settings
from catalog.database import ConnectionProvider, create_tables, drop_tables
from catalog.dependencies import get_catalog
from catalog.main import app
from catalog.models import Book
from catalog.services import BookCatalog, BookRepository


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def provider() -> Generator[ConnectionProvider, None, None]:
    """
    ConnectionProvider with the books table created.

    Scope: function. Every test gets its own database.
    """
    provider = ConnectionProvider(
        Settings(),
        url="sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(provider.get_instance())

    yield provider

    drop_tables(provider.get_instance())
    provider.dispose()


@pytest.fixture
def repository(provider: ConnectionProvider) -> BookRepository:
    return BookRepository(provider)


@pytest.fixture
def catalog(repository: BookRepository) -> BookCatalog:
    return BookCatalog(repository)


@pytest.fixture
def client(catalog: BookCatalog) -> Generator[TestClient, None, None]:
    """
    Test client with the catalog dependency pointed at the test database.
    """
    app.dependency_overrides[get_catalog] = lambda: catalog

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_book(repository: BookRepository) -> Book:
    book = Book(
        title="1984",
        author="George Orwell",
        category="Dystopie",
        year=1949,
        publisher="Secker & Warburg",
    )
    repository.save(book)
    return book


@pytest.fixture
def sample_books(repository: BookRepository) -> list[Book]:
    """A handful of books sharing authors and categories."""
    books = [
        Book("Der Hobbit", "J.R.R. Tolkien", "Fantasy", 1937, "George Allen & Unwin"),
        Book("1984", "George Orwell", "Dystopie", 1949, "Secker & Warburg"),
        Book("Der Herr der Ringe: Die Gefährten", "J.R.R. Tolkien", "Fantasy", 1954, "Klett-Cotta"),
        Book("Tolkien Biography", "Tolkien", "Biografie", None, None),
        Book("Animal Farm", "George Orwell", "Satire", 1945, None),
        Book("Die Chroniken von Narnia", "C.S. Lewis", "Fantasy", 1950, "Geoffrey Bles"),
    ]
    for book in books:
        repository.save(book)
    return books

"""
Test Suite for WebBiblio

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_config.py: Settings and database URL
- test_connection.py: ConnectionProvider
- test_models.py: Book value and row mapping
- test_repository.py: BookRepository CRUD and finders
- test_filters.py: FilterResolver precedence rules
- test_catalog.py: BookCatalog add/edit/remove/list
- test_seeder.py: Sample-data seeding
- test_books.py: /api/v1/books endpoints

Running Tests:
    # Run all tests
    pytest

    # Run with coverage
    pytest --cov=catalog --cov-report=html

    # Run specific file
    pytest tests/test_repository.py
"""

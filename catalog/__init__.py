"""
WebBiblio Catalog Package

A single-table library catalog: books with title, author, category and
optional year and publisher.

Package Structure:
- config.py: Connection parameters and app settings (Pydantic Settings)
- database.py: ConnectionProvider (lazy SQLAlchemy engine) and metadata
- exceptions.py: CatalogError hierarchy
- models/: books table and the Book value
- services/: BookRepository, FilterResolver, BookCatalog, seeder
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- main.py: FastAPI application
"""

__version__ = "1.0.0"

"""
FastAPI Application Entry Point

Creates the WebBiblio application: logging, exception handlers and the
books router.

The database engine is not created at startup. The first request that
needs it triggers ConnectionProvider.get_instance(); if the server is
down, that request gets a 503 and the next one tries again.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog.config import get_settings
from catalog.exceptions import BookValidationError, CatalogConnectionError, StorageError
from catalog.routers import books_router

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(
        f"Database: {settings.database_url.render_as_string(hide_password=True)}"
    )

    yield

    logger.info(f"Shutting down {settings.app_name}...")


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## WebBiblio

Manage a small library catalog: add, list, filter, edit and delete books.

### Filters
`author` and `category` are exact, case-sensitive matches.
Only one filter is applied at a time; `category` wins if both are given.
        """,
        version=settings.api_version,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    @app.exception_handler(BookValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: BookValidationError,
    ) -> JSONResponse:
        logger.info(f"Rejected book input: {exc}")
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(CatalogConnectionError)
    async def connection_exception_handler(
        request: Request,
        exc: CatalogConnectionError,
    ) -> JSONResponse:
        logger.error(f"Database unavailable: {exc}")
        return JSONResponse(
            status_code=503,
            content={"detail": "The database is not reachable. Please try again later."},
        )

    @app.exception_handler(StorageError)
    async def storage_exception_handler(
        request: Request,
        exc: StorageError,
    ) -> JSONResponse:
        """
        Statement failures.

        The real error is logged; users only see it in debug mode.
        """
        logger.error(f"Database error: {exc}")
        detail = str(exc) if settings.debug else "A database error occurred."
        return JSONResponse(status_code=500, content={"detail": detail})

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    api_prefix = f"/api/{settings.api_version}"
    app.include_router(books_router, prefix=api_prefix)

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> dict:
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": settings.api_version,
        }

    return app


# This is what uvicorn imports: uvicorn catalog.main:app
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )

"""
Books Router

CRUD endpoints over BookCatalog:

    GET    /books/              list, optional ?author= or ?category=
    GET    /books/{book_id}     one book
    POST   /books/              add
    PUT    /books/{book_id}     replace all fields
    DELETE /books/{book_id}     remove

Catalog errors are turned into HTTP responses by the handlers in
catalog.main.
"""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Path, status

from catalog.dependencies import BookFilters, Catalog
from catalog.models.book import Book
from catalog.schemas import BookForm, BookListResponse, BookResponse

# Largest value a signed 64-bit id column can hold
MAX_BOOK_ID = 2**63 - 1

BookId = Annotated[
    int, Path(ge=1, le=MAX_BOOK_ID, description="Book id", examples=[1])
]

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        404: {"description": "Book not found"},
    },
)


def book_not_found(book_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Book with id {book_id} not found",
    )


def get_book_or_404(catalog: Catalog, book_id: int) -> Book:
    book = catalog.get(book_id)
    if book is None:
        raise book_not_found(book_id)
    return book


@router.get(
    "/",
    response_model=BookListResponse,
    summary="List books",
    description="List all books, or the books matching one exact author or category filter.",
)
def list_books(catalog: Catalog, filters: BookFilters) -> BookListResponse:
    """
    List books ordered by id.

    If both filters are given, only the category filter is applied.
    """
    books = catalog.list(filters.author, filters.category)
    return BookListResponse(
        items=[BookResponse.model_validate(book) for book in books],
        total=len(books),
        author_filter=filters.author,
        category_filter=filters.category,
    )


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
def get_book(book_id: BookId, catalog: Catalog) -> BookResponse:
    return BookResponse.model_validate(get_book_or_404(catalog, book_id))


@router.post(
    "/",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a book",
)
def create_book(book_data: BookForm, catalog: Catalog) -> BookResponse:
    """
    Add a book.

    Title, author and category are required; year and publisher are
    optional. Returns the stored book with its new id.
    """
    book = catalog.add(**book_data.model_dump())
    return BookResponse.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Replace all fields of an existing book.",
)
def update_book(book_id: BookId, book_data: BookForm, catalog: Catalog) -> BookResponse:
    """
    Replace a book's fields.

    This is a full update: omitted optional fields are cleared.
    """
    book = catalog.edit(book_id, **book_data.model_dump())
    if book is None:
        raise book_not_found(book_id)
    return BookResponse.model_validate(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
)
def delete_book(book_id: BookId, catalog: Catalog) -> None:
    if not catalog.remove(book_id):
        raise book_not_found(book_id)

"""
Book Pydantic Schemas

- BookForm: the fields a caller submits to add or edit a book.
  Strings are trimmed; blank optional values become None.
- BookResponse: one book as returned by the API.
- BookListResponse: the list view, optionally filtered.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class BookForm(BaseModel):
    """
    Submitted book fields.

    The only clean-up applied is trimming whitespace. Year has no range
    check; the database's own constraints apply.

    Example request body:
    {
        "title": "1984",
        "author": "George Orwell",
        "category": "Dystopie",
        "year": 1949,
        "publisher": "Secker & Warburg"
    }
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., description="Book title", examples=["1984"])
    author: str = Field(..., description="Author, matched exactly by filters", examples=["George Orwell"])
    category: str = Field(..., description="Category, matched exactly by filters", examples=["Dystopie"])
    year: int | None = Field(default=None, description="Publication year", examples=[1949])
    publisher: str | None = Field(default=None, description="Publisher", examples=["Secker & Warburg"])

    @field_validator("year", "publisher", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """An empty form field means 'not set'."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("year", mode="before")
    @classmethod
    def year_not_boolean(cls, v):
        # bool is an int subclass; lax mode would store True as year 1
        if isinstance(v, bool):
            raise ValueError("year must be a number, not a boolean")
        return v

    @field_validator("title", "author", "category")
    @classmethod
    def must_not_be_empty(cls, v: str, info: ValidationInfo) -> str:
        if not v:
            raise ValueError(f"{info.field_name} must not be empty")
        return v


class BookResponse(BaseModel):
    """A stored book."""

    id: int = Field(..., description="Unique identifier")
    title: str
    author: str
    category: str
    year: int | None = None
    publisher: str | None = None

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 2,
                "title": "1984",
                "author": "George Orwell",
                "category": "Dystopie",
                "year": 1949,
                "publisher": "Secker & Warburg",
            }
        },
    )


class BookListResponse(BaseModel):
    """
    The list view.

    author_filter/category_filter echo the filters that were received.
    At most one of them was applied; see FilterResolver.
    """

    items: list[BookResponse] = Field(..., description="Books ordered by id")
    total: int = Field(..., ge=0, description="Number of books returned")
    author_filter: str | None = None
    category_filter: str | None = None

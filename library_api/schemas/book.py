"""
Book Pydantic Schemas

Handles:
- Create/update validation (title, positive page count, owning author)
- Responses with and without the embedded author
- The paginated search envelope
"""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from library_api.schemas.base import CamelModel, blank_to_none
from library_api.schemas.pagination import PaginationInfo


class BookBase(CamelModel):
    """
    Base schema with shared book fields.

    ISBN is kept as entered; only its length is limited.
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["One Hundred Years of Solitude", "Ficciones"],
    )

    description: str | None = Field(
        default=None,
        max_length=5000,
        description="Book description or summary",
    )

    isbn: str | None = Field(
        default=None,
        max_length=20,
        description="ISBN as printed on the book",
        examples=["978-0060883287"],
    )

    published_year: int | None = Field(
        default=None,
        description="Year of publication",
        examples=[1967, 1944],
    )

    genre: str | None = Field(
        default=None,
        max_length=100,
        description="Genre (matched exactly by search)",
        examples=["Magical Realism", "Short Stories"],
    )

    pages: int | None = Field(
        default=None,
        gt=0,
        description="Number of pages",
        examples=[417, 174],
    )

    @field_validator("description", "isbn", "genre", mode="before")
    @classmethod
    def empty_text_is_none(cls, v):
        """Blank optional text fields are stored as NULL."""
        return blank_to_none(v)

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "Ficciones",
        "publishedYear": 1944,
        "genre": "Short Stories",
        "authorId": 2
    }
    """

    author_id: int = Field(
        ...,
        description="ID of the owning author",
        examples=[1],
    )


class BookUpdate(CamelModel):
    """
    Schema for updating an existing book.

    Only the fields present in the request body are changed. Required
    columns (title, authorId) may be omitted but not set to null.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = Field(default=None, max_length=5000)
    isbn: str | None = Field(default=None, max_length=20)
    published_year: int | None = Field(default=None)
    genre: str | None = Field(default=None, max_length=100)
    pages: int | None = Field(default=None, gt=0)
    author_id: int | None = Field(default=None, description="Move the book to another author")

    @field_validator("description", "isbn", "genre", mode="before")
    @classmethod
    def empty_text_is_none(cls, v):
        return blank_to_none(v)

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str | None) -> str:
        """Validate title if provided."""
        if v is None or not v.strip():
            raise ValueError("Title cannot be empty or null")
        return v.strip()

    @field_validator("author_id")
    @classmethod
    def author_id_must_not_be_null(cls, v: int | None) -> int:
        if v is None:
            raise ValueError("authorId cannot be null")
        return v


class BookResponse(BookBase):
    """Schema for book responses, including database fields."""

    id: int = Field(..., description="Unique identifier")
    author_id: int = Field(..., description="ID of the owning author")
    created_at: datetime = Field(..., description="When the book was created")
    updated_at: datetime = Field(..., description="When the book was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "One Hundred Years of Solitude",
                "description": "The multi-generational story of the Buendia family.",
                "isbn": "978-0060883287",
                "publishedYear": 1967,
                "genre": "Magical Realism",
                "pages": 417,
                "authorId": 1,
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )


class BookAuthor(CamelModel):
    """The owning author's public fields, as embedded in book results."""

    id: int
    name: str
    email: str
    nationality: str | None = None

    model_config = ConfigDict(from_attributes=True)


class BookWithAuthorResponse(BookResponse):
    """Book response with its author embedded."""

    author: BookAuthor = Field(..., description="Owning author")


class BookSearchResponse(CamelModel):
    """
    Schema for paginated search results.

    {
        "data": [...books with author...],
        "pagination": {"page": 1, "limit": 10, "total": 42,
                       "totalPages": 5, "hasNext": true, "hasPrev": false}
    }
    """

    data: list[BookWithAuthorResponse] = Field(
        ...,
        description="Books on this page",
    )

    pagination: PaginationInfo = Field(
        ...,
        description="Pagination metadata",
    )

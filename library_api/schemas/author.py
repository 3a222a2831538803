"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

Pydantic v2 Features Used:
- model_config / ConfigDict: from_attributes for ORM objects
- Field(): Constraints and metadata
- field_validator: Validate and transform field values
- EmailStr: Built-in email validation
"""

from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field, field_validator

from library_api.schemas.base import CamelModel, blank_to_none
from library_api.schemas.book import BookResponse

MIN_BIRTH_YEAR = 1800


def check_birth_year(v: int | None) -> int | None:
    """Reject birth years outside 1800..current year."""
    if v is None:
        return v
    current_year = datetime.now().year
    if not MIN_BIRTH_YEAR <= v <= current_year:
        raise ValueError(
            f"Birth year must be between {MIN_BIRTH_YEAR} and {current_year}"
        )
    return v


class AuthorBase(CamelModel):
    """
    Base schema with shared author fields.

    Contains fields common to create and response schemas.
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author's full name",
        examples=["Gabriel Garcia Marquez", "Jorge Luis Borges"],
    )

    email: EmailStr = Field(
        ...,
        max_length=255,
        description="Contact email address",
        examples=["gabo@example.com"],
    )

    bio: str | None = Field(
        default=None,
        max_length=5000,
        description="Author biography",
    )

    nationality: str | None = Field(
        default=None,
        max_length=100,
        description="Author nationality",
        examples=["Colombian", "Argentine"],
    )

    birth_year: int | None = Field(
        default=None,
        description="Year the author was born",
        examples=[1927, 1899],
    )

    @field_validator("bio", "nationality", mode="before")
    @classmethod
    def empty_text_is_none(cls, v):
        """Blank optional text fields are stored as NULL."""
        return blank_to_none(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """
        Validate that name is not just whitespace.

        Raises:
            ValueError: If the name is blank
        """
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()

    @field_validator("birth_year")
    @classmethod
    def birth_year_in_range(cls, v: int | None) -> int | None:
        return check_birth_year(v)


class AuthorCreate(AuthorBase):
    """
    Schema for creating a new author.

    Inherits all fields and validation from AuthorBase.
    """
    pass


class AuthorUpdate(CamelModel):
    """
    Schema for updating an existing author.

    All fields are optional: only the fields present in the request body
    are changed. Name and email may be omitted but not set to null.
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = Field(default=None, max_length=255)
    bio: str | None = Field(default=None, max_length=5000)
    nationality: str | None = Field(default=None, max_length=100)
    birth_year: int | None = Field(default=None)

    @field_validator("bio", "nationality", mode="before")
    @classmethod
    def empty_text_is_none(cls, v):
        return blank_to_none(v)

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str | None) -> str:
        """Validate name if provided."""
        if v is None or not v.strip():
            raise ValueError("Name cannot be empty or null")
        return v.strip()

    @field_validator("email")
    @classmethod
    def email_must_not_be_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Email cannot be null")
        return v

    @field_validator("birth_year")
    @classmethod
    def birth_year_in_range(cls, v: int | None) -> int | None:
        return check_birth_year(v)


class AuthorResponse(AuthorBase):
    """
    Schema for author responses (what the API returns).

    Includes database fields like id and timestamps.
    """

    # Stored addresses were validated on the way in.
    email: str = Field(..., description="Contact email address")

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    created_at: datetime = Field(
        ...,
        description="When the author was created",
    )

    updated_at: datetime = Field(
        ...,
        description="When the author was last updated",
    )

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Gabriel Garcia Marquez",
                "email": "gabo@example.com",
                "bio": "Colombian novelist and journalist.",
                "nationality": "Colombian",
                "birthYear": 1927,
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )


class AuthorListItem(AuthorResponse):
    """Author row in the author list, with the number of books owned."""

    book_count: int = Field(
        default=0,
        ge=0,
        description="Number of books by this author",
    )


class AuthorDetailResponse(AuthorResponse):
    """Author detail with the author's books embedded."""

    books: list[BookResponse] = Field(
        default_factory=list,
        description="Books by this author, newest first",
    )

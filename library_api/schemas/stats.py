"""
Statistics Schemas

Response shapes for the per-author and catalog-wide summaries.
"""

from pydantic import Field

from library_api.schemas.base import CamelModel


class BookYear(CamelModel):
    """A book referenced by its publication year."""

    title: str
    year: int


class BookPages(CamelModel):
    """A book referenced by its page count."""

    title: str
    pages: int


class AuthorStats(CamelModel):
    """
    Summary figures over one author's books.

    Books missing a year, a page count or a genre are left out of that
    figure only; they still count toward total_books and the others.
    """

    author_id: int
    author_name: str
    total_books: int = Field(..., ge=0)
    first_book: BookYear | None = Field(
        default=None,
        description="Earliest book with a known publication year",
    )
    latest_book: BookYear | None = Field(
        default=None,
        description="Latest book with a known publication year",
    )
    average_pages: int = Field(
        default=0,
        description="Rounded mean page count over books with a page count",
    )
    genres: list[str] = Field(
        default_factory=list,
        description="Distinct genres, sorted",
    )
    longest_book: BookPages | None = None
    shortest_book: BookPages | None = None


class CatalogStats(CamelModel):
    """Summary figures over the whole catalog."""

    total_authors: int = Field(..., ge=0)
    total_books: int = Field(..., ge=0)
    average_books_per_author: float = Field(
        ...,
        description="Books per author, rounded to one decimal",
    )
    average_pages: int = Field(
        default=0,
        description="Rounded mean page count over books with a page count",
    )
    genres: list[str] = Field(default_factory=list)

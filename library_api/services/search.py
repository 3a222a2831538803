"""
Book Search Service

Builds the filtered, sorted and paginated book query behind
GET /books/search.

Normalization rules (applied silently, never an error):
- Blank text filters are dropped entirely
- page < 1 becomes 1; page is capped so the row offset fits a 64-bit integer
- limit is clamped into 1..search_max_limit
- Unknown sortBy becomes createdAt, unknown order becomes desc
"""

import logging
from dataclasses import dataclass

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from library_api.config import get_settings
from library_api.exceptions import StoreError
from library_api.models import Author, Book

logger = logging.getLogger(__name__)

# Public sort keys -> mapped columns
SORT_COLUMNS = {
    "title": Book.title,
    "publishedYear": Book.published_year,
    "createdAt": Book.created_at,
}
DEFAULT_SORT = "createdAt"
SORT_ORDERS = ("asc", "desc")
DEFAULT_ORDER = "desc"

# Largest OFFSET + LIMIT the databases accept (signed 64-bit)
MAX_ROW_OFFSET = 2**63 - 1


def _clean_text(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class SearchQuery:
    """
    A validated book search request.

    Build instances with SearchQuery.from_params() so every field is
    already normalized; the query layer trusts these values.
    """

    search: str | None = None
    genre: str | None = None
    author_name: str | None = None
    page: int = 1
    limit: int = 10
    sort_by: str = DEFAULT_SORT
    order: str = DEFAULT_ORDER

    @classmethod
    def from_params(
        cls,
        search: str | None = None,
        genre: str | None = None,
        author_name: str | None = None,
        page: int | None = None,
        limit: int | None = None,
        sort_by: str | None = None,
        order: str | None = None,
    ) -> "SearchQuery":
        """
        Normalize raw request values into a SearchQuery.

        Examples:
            >>> SearchQuery.from_params(limit=1000).limit
            50
            >>> SearchQuery.from_params(sort_by="price").sort_by
            'createdAt'
        """
        settings = get_settings()

        if limit is None:
            limit = settings.search_default_limit
        limit = max(1, min(limit, settings.search_max_limit))

        if page is None or page < 1:
            page = 1
        # Any page this far out is past the end: same empty result, valid SQL
        page = min(page, MAX_ROW_OFFSET // limit)

        if sort_by not in SORT_COLUMNS:
            sort_by = DEFAULT_SORT
        if order not in SORT_ORDERS:
            order = DEFAULT_ORDER

        return cls(
            search=_clean_text(search),
            genre=_clean_text(genre),
            author_name=_clean_text(author_name),
            page=page,
            limit=limit,
            sort_by=sort_by,
            order=order,
        )

    @property
    def offset(self) -> int:
        """Rows to skip: page 1 -> 0, page 2 -> limit, ..."""
        return (self.page - 1) * self.limit


def apply_search_filters(stmt: Select, query: SearchQuery) -> Select:
    """
    AND the query's filters onto a select(Book) statement.

    - search: title contains the term (case-insensitive)
    - genre: exact match
    - author_name: owning author's name contains the term (case-insensitive)

    Absent filters add no condition. User input is escaped so % and _
    match literally.

    Case folding happens in the database on both sides of the match
    (ILIKE on PostgreSQL, lower() LIKE lower() elsewhere). PostgreSQL
    folds every letter; SQLite's lower() folds ASCII letters only, so
    there "ÁLVARO" and "álvaro" do not match each other.
    """
    if query.search:
        stmt = stmt.where(Book.title.icontains(query.search, autoescape=True))

    if query.genre:
        stmt = stmt.where(Book.genre == query.genre)

    if query.author_name:
        stmt = stmt.where(
            Book.author.has(Author.name.icontains(query.author_name, autoescape=True))
        )

    return stmt


def apply_sorting(stmt: Select, query: SearchQuery) -> Select:
    """Order by the requested column, with the id as a stable tie-breaker."""
    column = SORT_COLUMNS[query.sort_by]
    if query.order == "asc":
        return stmt.order_by(column.asc(), Book.id.asc())
    return stmt.order_by(column.desc(), Book.id.desc())


def search_books(db: Session, query: SearchQuery) -> tuple[int, list[Book]]:
    """
    Run a book search.

    Issues one count query over all matching rows and one fetch for the
    requested page, with each book's author loaded.

    Args:
        db: Database session
        query: Normalized search parameters

    Returns:
        (total matching rows, books on the requested page)

    Raises:
        StoreError: If the database cannot run either query
    """
    logger.debug(f"Book search: {query}")

    filtered_stmt = apply_search_filters(select(Book), query)
    count_stmt = select(func.count()).select_from(filtered_stmt.subquery())

    page_stmt = (
        apply_sorting(filtered_stmt, query)
        .options(selectinload(Book.author))
        .offset(query.offset)
        .limit(query.limit)
    )

    try:
        total = db.execute(count_stmt).scalar() or 0
        books = list(db.execute(page_stmt).scalars().all())
    except SQLAlchemyError as exc:
        logger.error(f"Book search failed: {exc}")
        raise StoreError("Book search query failed") from exc

    return total, books

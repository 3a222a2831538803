"""
Author Model

Represents an author in the catalog.

SQLAlchemy 2.0 Features Used:
- mapped_column(): Column definitions with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
- relationship(): One-to-many link to Book with delete cascade
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base

if TYPE_CHECKING:
    from library_api.models.book import Book


class Author(Base):
    """
    Author model representing writers in the catalog.

    Table: authors

    Relationships:
    - books: One-to-Many. Deleting an author deletes all of its books,
      so no book can reference a missing author.

    Example:
        author = Author(
            name="Gabriel Garcia Marquez",
            email="gabo@example.com",
            nationality="Colombian",
            birth_year=1927,
        )
        db.add(author)
        db.commit()
    """

    __tablename__ = "authors"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    id: Mapped[int] = mapped_column(primary_key=True)

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    name: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author's full name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Contact email address"
    )

    bio: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Author biography"
    )

    nationality: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Author nationality"
    )

    birth_year: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Year the author was born"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    # Set in Python (not server_default) so sub-second ordering holds on
    # every backend, including SQLite.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        comment="When the author record was created"
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
        comment="When the author record was last updated"
    )

    # -------------------------------------------------------------------------
    # Relationships
    # -------------------------------------------------------------------------
    # cascade="all, delete-orphan" deletes the books through the ORM;
    # the foreign key also carries ON DELETE CASCADE for direct SQL deletes.
    books: Mapped[list["Book"]] = relationship(
        "Book",
        back_populates="author",
        cascade="all, delete-orphan",
        order_by="Book.created_at.desc()",
    )

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}')"

"""
pytest Fixtures for Library Catalog API Tests

Shared fixtures used across all test files.

FIXTURE SCOPES:
- session scope for the engine (expensive to create)
- function scope for sessions (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# Set environment variables BEFORE importing the app: rate limiting off,
# and an in-memory SQLite URL so importing the app needs no server.
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_api.database import Base, enable_sqlite_foreign_keys, get_db
from library_api.main import app
from library_api.models import Author, Book

API = "/api/v1"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture(scope="session")
def engine():
    """
    Create a SQLite in-memory database engine.

    StaticPool keeps the single connection alive for the whole session;
    without it the in-memory database would disappear between connections.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session runs inside an outer transaction that is rolled back
    afterwards, so tests don't affect each other.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client that uses the test database session.

    get_db is overridden so every request shares db_session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_author(db_session: Session) -> Author:
    """Create a sample author for testing."""
    author = Author(
        name="Gabriel Garcia Marquez",
        email="gabo@example.com",
        bio="Colombian novelist and journalist.",
        nationality="Colombian",
        birth_year=1927,
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def second_author(db_session: Session) -> Author:
    """Create a second author for ownership scenarios."""
    author = Author(
        name="Jorge Luis Borges",
        email="borges@example.com",
        nationality="Argentine",
        birth_year=1899,
    )
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author


@pytest.fixture
def sample_book(db_session: Session, sample_author: Author) -> Book:
    """Create a sample book owned by sample_author."""
    book = Book(
        title="One Hundred Years of Solitude",
        description="The multi-generational story of the Buendia family.",
        isbn="978-0060883287",
        published_year=1967,
        genre="Magical Realism",
        pages=417,
        author=sample_author,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session, sample_author: Author) -> list[Book]:
    """Create 15 books (more than the default page size)."""
    books = []
    for i in range(15):
        book = Book(
            title=f"Test Book {i + 1:02d}",
            published_year=1950 + i,
            genre="Novel" if i % 2 == 0 else "Short Stories",
            pages=100 + i * 10,
            author=sample_author,
        )
        db_session.add(book)
        db_session.flush()
        books.append(book)

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books

"""
Database Configuration Module

Sets up SQLAlchemy 2.0 for the catalog.

We use SYNCHRONOUS SQLAlchemy: every request is a handful of short queries,
so a plain connection pool is all the API needs.

Session Management Pattern
==========================
"Session per request":
1. Request arrives -> create a new session
2. Use the session for all database operations in that request
3. Commit on success; anything uncommitted is rolled back on close
4. Close the session when the request ends

This is implemented with FastAPI's dependency injection (get_db).
"""

from collections.abc import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_api.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# Key parameters:
# - pool_size / max_overflow: connection pool sizing (server databases only)
# - pool_pre_ping: test connection health before using it
# - echo: log all SQL statements in debug mode

def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    Turn on foreign key enforcement for every SQLite connection.

    SQLite ignores REFERENCES ... ON DELETE CASCADE unless the pragma
    is set per connection.
    """

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str) -> Engine:
    """
    Create the engine for a database URL.

    SQLite gets a single shared connection for in-memory databases and
    foreign keys switched on; server databases get a sized pool.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url:
            kwargs["poolclass"] = StaticPool
        sqlite_engine = create_engine(database_url, echo=settings.debug, **kwargs)
        enable_sqlite_foreign_keys(sqlite_engine)
        return sqlite_engine

    return create_engine(
        database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        echo=settings.debug,
    )


engine = build_engine(settings.database_url)


# =============================================================================
# Session Factory
# =============================================================================
# - autocommit=False: we control when to commit
# - autoflush=False: don't auto-flush before queries

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover the tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, the route uses it, and the
    finally block closes it even if the handler raised. Closing a session
    with an open transaction rolls it back, so a failed write never
    leaves partial changes behind.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Useful for local development and tests. In production, use Alembic
    migrations instead.
    """
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Development and tests only.
    """
    Base.metadata.drop_all(bind=engine)

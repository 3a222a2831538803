"""
Library Catalog API Package

A JSON API for a library catalog of authors and books.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session and declarative base
- main.py: FastAPI application factory, error handlers, router registration
- dependencies.py: Dependency injection (DB session, search parameters)
- exceptions.py: Domain exceptions mapped to HTTP error responses
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Search, pagination, statistics and rate limiting
"""

__version__ = "0.1.0"

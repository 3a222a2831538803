"""
Domain Exceptions

Routers and services raise these; the handlers registered in
library_api.main translate them into the {"error": "..."} envelope.

Mapping:
- ValidationError -> 400
- NotFoundError   -> 404
- StoreError      -> 500
"""

from fastapi import status


class CatalogError(Exception):
    """Base class for errors the API reports to clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """Raised when input is well-formed but semantically invalid."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(CatalogError):
    """Raised when a requested resource is not found."""

    status_code = status.HTTP_404_NOT_FOUND

    @classmethod
    def for_resource(cls, resource: str, resource_id: int) -> "NotFoundError":
        return cls(f"{resource} with id {resource_id} not found")


class StoreError(CatalogError):
    """Raised when the database cannot be reached or rejects a statement."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

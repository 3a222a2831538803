"""
Shared schema base.

The API speaks camelCase JSON (publishedYear, authorId, totalPages, ...)
while the Python side keeps snake_case attribute names. Request bodies
accept either spelling.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that (de)serializes field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def blank_to_none(v: object) -> object:
    """Treat empty or whitespace-only strings as "not provided"."""
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v

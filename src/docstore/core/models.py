"""Data models for stored documents and search requests"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so every comparison is between aware values."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Document author; matched by id only."""
    id: str
    name: Optional[str] = None


class Document(BaseModel):
    """A stored document. id and created are filled in by the store on save."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None

    normalize_created = field_validator("created")(_as_utc)


class SearchRequest(BaseModel):
    """Search filters; every field is optional and an absent field does not filter."""
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes: Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids: Optional[list[str]] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None

    normalize_bounds = field_validator("created_from", "created_to")(_as_utc)

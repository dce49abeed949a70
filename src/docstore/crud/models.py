"""Record types held by the repository: authors, documents and search requests"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so instants always compare."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """An identity embedded in a Document."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""


class Document(BaseModel):
    """A stored record. id=None (or "") marks a document not yet saved."""
    model_config = ConfigDict(validate_assignment=True)

    id: Optional[str] = None
    title: str
    content: str
    author: Author
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def utc_created(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

    @property
    def is_new(self) -> bool:
        return not self.id


class SearchRequest(BaseModel):
    """Structured filter: AND across fields, OR within each list. None or [] means unconstrained."""
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None    # exclusive
    created_to:        Optional[datetime] = None    # exclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def utc_bounds(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)

"""Pydantic schemas for blog requests and responses."""

from pydantic import BaseModel, Field

from ...auth.schemas import UserSummary

# Largest value an SQLite INTEGER column can hold
MAX_LIKES = 2**63 - 1


class BlogCreate(BaseModel):
    """Create request.

    title and url are typed optional so a body missing them reaches the blog
    service, which rejects it with "title and url are required".
    """

    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = Field(default=None, ge=0, le=MAX_LIKES)


class BlogUpdate(BaseModel):
    """Partial update. Fields left out, or sent as null, keep their value."""

    title: str | None = Field(default=None, min_length=1)
    author: str | None = None
    url: str | None = Field(default=None, min_length=1)
    likes: int | None = Field(default=None, ge=0, le=MAX_LIKES)


class BlogResponse(BaseModel):
    id: str
    title: str
    author: str | None = None
    url: str
    likes: int = 0
    user: UserSummary | None = None

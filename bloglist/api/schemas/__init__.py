"""Pydantic schemas for API validation.

Blog schemas are defined here. Auth schemas are re-exported from the auth
module for use in API endpoints.
"""

from bloglist.auth.schemas import (
    Identity,
    TokenResponse,
    UserCreate,
    UserLogin,
    UserResponse,
    UserSummary,
)

from .blog import BlogCreate, BlogResponse, BlogUpdate

__all__ = [
    "BlogCreate",
    "BlogUpdate",
    "BlogResponse",
    # Auth schemas (re-exported from bloglist.auth.schemas)
    "Identity",
    "TokenResponse",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserSummary",
]

"""Authentication Pydantic schemas for API validation."""

from .auth import (
    BlogSummary,
    Identity,
    TokenPayload,
    TokenResponse,
    UserBase,
    UserCreate,
    UserLogin,
    UserResponse,
    UserSummary,
)

__all__ = [
    "BlogSummary",
    "Identity",
    "TokenPayload",
    "TokenResponse",
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserSummary",
]

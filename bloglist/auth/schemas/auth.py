"""Pydantic schemas for users, login and tokens."""

import re

from pydantic import BaseModel, Field, field_validator

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

# bcrypt only accepts passwords up to this many bytes
MAX_PASSWORD_BYTES = 72


class UserBase(BaseModel):
    """Fields shared by every user schema."""

    username: str = Field(..., min_length=3, max_length=50)

    @field_validator("username")
    @classmethod
    def normalize_username(cls, value: str) -> str:
        if not USERNAME_PATTERN.match(value):
            raise ValueError(
                "Username may contain only letters, digits, underscores and hyphens"
            )
        return value.lower()


class UserCreate(UserBase):
    """User registration request."""

    name: str | None = Field(default=None, max_length=100)
    password: str = Field(..., min_length=3, max_length=128)

    @field_validator("password")
    @classmethod
    def check_password_bytes(cls, value: str) -> str:
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class UserLogin(BaseModel):
    """Login request. No format checks, so a bad username just fails to match."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def lowercase_username(cls, value: str) -> str:
        return value.lower()


class UserSummary(BaseModel):
    """Reduced user projection attached to blogs and login responses."""

    id: str
    username: str
    name: str | None = None


class BlogSummary(BaseModel):
    """Blog projection listed under a user."""

    id: str
    title: str
    author: str | None = None
    url: str
    likes: int = 0


class UserResponse(UserSummary):
    """User as returned by the API. Never carries the password hash."""

    blogs: list[BlogSummary] = Field(default_factory=list)


class TokenPayload(BaseModel):
    """Claims carried by an access token.

    sub and username are optional here so a signed token without an identity
    can be told apart from a forged one.
    """

    sub: str | None = None
    username: str | None = None
    iat: int
    exp: int


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int
    user: UserSummary


class Identity(BaseModel):
    """Verified caller identity resolved from a bearer token."""

    user_id: str
    username: str | None = None

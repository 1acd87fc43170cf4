"""User service: password hashing, registration and credential checks.

All functions take a db Core; none of them commit explicitly, so they run
in whatever mode (autocommit or atomic) the caller opened the Core with.
"""

import logging
import sqlite3

import bcrypt

from ..db import Core
from ..exceptions import ValidationError
from .schemas import BlogSummary, UserCreate, UserResponse, UserSummary
from .schemas.auth import MAX_PASSWORD_BYTES

logger = logging.getLogger(__name__)


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str, work_factor: int = 12) -> str:
    """Hash a password with bcrypt. Returns the 60-character hash string."""
    salt = bcrypt.gensalt(rounds=work_factor)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain-text password against a bcrypt hash.

    Passwords over MAX_PASSWORD_BYTES never match.
    """
    encoded = password.encode("utf-8")
    if not encoded or len(encoded) > MAX_PASSWORD_BYTES:
        return False
    return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))


# ============================================================================
# User Operations
# ============================================================================


def _row_to_summary(row) -> UserSummary:
    return UserSummary(id=row["id"], username=row["username"], name=row["name"])


def _row_to_response(core: Core, row) -> UserResponse:
    blogs = [BlogSummary(**dict(blog)) for blog in core.user.blogs(row["id"])]
    return UserResponse(
        id=row["id"],
        username=row["username"],
        name=row["name"],
        blogs=blogs
    )


def create_user(core: Core, data: UserCreate, work_factor: int = 12) -> UserResponse:
    """Register a user with a hashed password.

    Raises:
        ValidationError: If the username is already taken
    """
    password_hash = hash_password(data.password, work_factor)
    try:
        user_id = core.user.insert(
            username=data.username,
            password_hash=password_hash,
            name=data.name
        )
    except sqlite3.IntegrityError:
        logger.warning(f"Registration failed, username taken: {data.username}")
        raise ValidationError(
            "expected `username` to be unique",
            {"username": data.username}
        )

    logger.info(f"User registered: {data.username}")
    return UserResponse(id=user_id, username=data.username, name=data.name)


def list_users(core: Core) -> list[UserResponse]:
    """All users with their blogs, oldest user first."""
    return [_row_to_response(core, row) for row in core.user.find()]


def verify_credentials(core: Core, username: str, password: str) -> UserSummary | None:
    """Return the user if username and password match, else None."""
    row = core.user.find_by_username(username.lower())
    if row is None:
        return None

    if not verify_password(password, row["password_hash"]):
        return None

    return _row_to_summary(row)

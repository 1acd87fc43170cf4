"""Authentication API endpoints.

These endpoints handle user accounts and return JSON responses:
- POST /api/users - Register a user
- GET  /api/users - List users with their blogs
- POST /api/login - Authenticate and return a JWT access token
"""

import logging

from flask import Blueprint, jsonify

from ..api import request_core
from ..api.validation import validate_request
from ..config import current_settings
from ..exceptions import AuthenticationError
from . import service, token
from .schemas import TokenResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__)


# ============================================================================
# Users
# ============================================================================


@auth_bp.post("/users")
@validate_request
def register_user(data: UserCreate):
    """
    Register a new user.

    Example request:
    ```json
    {
        "username": "mluukkai",
        "name": "Matti Luukkainen",
        "password": "salainen"
    }
    ```

    Returns:
        201: UserResponse (never includes the password hash)
        400: Invalid data or username already taken
    """
    settings = current_settings()
    user = service.create_user(request_core(), data, settings.bcrypt_work_factor)
    return jsonify(user.model_dump()), 201


@auth_bp.get("/users")
def list_users():
    """
    List users, each with the blogs they own.

    Returns:
        200: Array of UserResponse with blogs [{id, title, author, url, likes}]
    """
    users = service.list_users(request_core())
    return jsonify([user.model_dump() for user in users])


# ============================================================================
# Login
# ============================================================================


@auth_bp.post("/login")
@validate_request
def login(data: UserLogin):
    """
    Authenticate user and return JWT token.

    Example response:
    ```json
    {
        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
        "token_type": "bearer",
        "expires_in": 2592000,
        "user": {"id": "550e8400-...", "username": "mluukkai", "name": "Matti Luukkainen"}
    }
    ```

    Raises:
        AuthenticationError: If credentials are invalid
    """
    user = service.verify_credentials(request_core(), data.username, data.password)
    if user is None:
        logger.warning(f"Failed login attempt for username: {data.username}")
        raise AuthenticationError(
            "invalid username or password",
            {"username": data.username}
        )

    settings = current_settings()
    access_token = token.generate_access_token(
        user,
        settings.jwt_secret_key,
        settings.jwt_expiry_days
    )

    logger.info(f"Successful login: {user.username}")

    return jsonify(
        TokenResponse(
            access_token=access_token,
            expires_in=token.get_token_expiry_remaining(access_token, settings.jwt_secret_key),
            user=user
        ).model_dump()
    ), 200

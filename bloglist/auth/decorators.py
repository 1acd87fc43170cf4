"""Credential Verifier and the @auth_required decorator.

verify_bearer_token() turns an Authorization header into a verified
Identity. @auth_required runs it for the current request and passes the
result to the view as the `identity` keyword argument; the view hands it
on to the service layer explicitly.
"""

import logging
from functools import wraps

import jwt
from flask import request

from ..config import current_settings
from ..exceptions import AuthenticationError, InvalidIdentity
from . import token
from .schemas import Identity

logger = logging.getLogger(__name__)


def verify_bearer_token(authorization: str | None, secret: str) -> Identity:
    """
    Resolve an Authorization header value to the caller's identity.

    Args:
        authorization: Raw header value, expected "Bearer <token>" (may be None)
        secret: Token signing secret

    Returns:
        Identity with the user id from the token's sub claim

    Raises:
        AuthenticationError: Header missing or malformed, token forged,
            malformed or expired
        InvalidIdentity: Token verifies but has no sub claim
    """
    if not authorization:
        logger.warning("Unauthenticated request to protected endpoint")
        raise AuthenticationError("token missing", {"code": "missing_auth"})

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        logger.warning("Malformed Authorization header")
        raise AuthenticationError(
            "Invalid authorization header format",
            {"code": "invalid_header", "expected": "Authorization: Bearer <token>"}
        )

    try:
        payload = token.validate_access_token(parts[1], secret)
    except jwt.ExpiredSignatureError:
        logger.warning("JWT token expired")
        raise AuthenticationError("token expired", {"code": "token_expired"})
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid JWT token: {e}")
        raise AuthenticationError("token invalid", {"code": "invalid_token"})

    if not payload.sub:
        logger.warning("JWT token carries no subject")
        raise InvalidIdentity("token does not identify a user", {"code": "invalid_identity"})

    return Identity(user_id=payload.sub, username=payload.username)


def auth_required(f):
    """
    Decorator to require a valid bearer token for endpoint access.

    The view must accept an `identity` keyword argument:

        @blogs_bp.delete("/<blog_id>")
        @auth_required
        def delete_blog(blog_id: str, identity: Identity):
            ...

    Raises:
        AuthenticationError: If no valid token is provided
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        identity = verify_bearer_token(
            request.headers.get("Authorization"),
            current_settings().jwt_secret_key
        )
        logger.debug(f"Authenticated request for user {identity.user_id}")
        return f(*args, identity=identity, **kwargs)

    return wrapper

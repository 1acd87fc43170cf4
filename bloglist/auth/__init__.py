"""Authentication module for the blog list API.

This module provides:
- Schema validation for auth operations
- JWT token generation and validation
- Password hashing and verification
- The @auth_required decorator that resolves the caller's identity

Auth endpoints (under the API prefix):
- POST /users - Register a user
- GET /users - List users with their blogs
- POST /login - Authenticate and return a JWT token
"""

from . import schemas, service, token

__all__ = ["schemas", "service", "token"]

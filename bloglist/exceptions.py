"""Exception hierarchy for the blog list API.

Every error raised by the service and auth layers derives from BlogListError.
The Flask error handlers in main.py map each class to an HTTP status code:

    ValidationError       400
    MalformedId           400
    AuthenticationError   401  (InvalidIdentity is a subclass)
    Forbidden             403
    ResourceNotFound      404
    DatabaseError         500
"""

from typing import Any


class BlogListError(Exception):
    """Base exception carrying a human-readable message and optional details."""

    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(BlogListError):
    """Request data is missing a required field or violates a constraint."""

    status_code = 400


class MalformedId(BlogListError):
    """Identifier does not have the storage id shape (not a UUID)."""

    status_code = 400


class AuthenticationError(BlogListError):
    """Missing, malformed or invalid credentials, or an unknown user."""

    status_code = 401


class InvalidIdentity(AuthenticationError):
    """Token signature is valid but it carries no usable identity claim."""


class Forbidden(BlogListError):
    """Caller is authenticated but does not own the resource."""

    status_code = 403


class ResourceNotFound(BlogListError):
    status_code = 404


class DatabaseError(BlogListError):
    """Storage is unavailable or failed in a way the request cannot recover from."""

    status_code = 500

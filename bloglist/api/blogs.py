"""Blog CRUD endpoints.

This module implements RESTful endpoints for blog management:
- GET    /api/blogs         - List blogs with owner projection
- GET    /api/blogs/{id}    - Get single blog
- POST   /api/blogs         - Create blog (bearer token required)
- PUT    /api/blogs/{id}    - Partial update (owner only)
- DELETE /api/blogs/{id}    - Delete blog (owner only)

Mutating endpoints authenticate before validating the body, so a request
without a token is always 401.
"""

from flask import Blueprint, jsonify

from .. import service
from ..auth.decorators import auth_required
from ..config import current_settings
from ..db import get_core
from . import request_core
from .schemas import BlogCreate, BlogUpdate, Identity
from .validation import validate_request


blogs_bp = Blueprint("blogs", __name__)


@blogs_bp.get("")
def list_blogs():
    """
    List all blogs in creation order.

    Returns:
        200: Array of BlogResponse, each with user {id, username, name}
    """
    blogs = service.list_blogs(request_core())
    return jsonify([blog.model_dump() for blog in blogs])


@blogs_bp.get("/<blog_id>")
def get_blog(blog_id: str):
    """
    Returns:
        200: BlogResponse
        400: Malformed id
        404: Blog not found
    """
    blog = service.get_blog(request_core(), blog_id)
    return jsonify(blog.model_dump())


@blogs_bp.post("")
@auth_required
@validate_request
def create_blog(data: BlogCreate, identity: Identity):
    """
    Create a blog owned by the authenticated user.

    Request Body (BlogCreate):
        - title: str (required)
        - url: str (required)
        - author: str | None
        - likes: int (default: 0)

    Returns:
        201: BlogResponse with created blog
        400: title or url missing
        401: Missing/invalid token or unknown user
    """
    # Blog insert and owner attribution commit together
    with get_core(current_settings().database_path, atomic=True) as core:
        blog = service.create_blog(core, data, identity)

    return jsonify(blog.model_dump()), 201


@blogs_bp.put("/<blog_id>")
@auth_required
@validate_request
def update_blog(blog_id: str, data: BlogUpdate, identity: Identity):
    """
    Update a blog. Only provided, non-null fields change.

    Request Body (BlogUpdate):
        All fields optional: title, author, url, likes

    Returns:
        200: BlogResponse with updated blog
        400: Malformed id or invalid data
        401: Missing/invalid token
        403: Caller does not own the blog
        404: Blog not found
    """
    blog = service.update_blog(request_core(), blog_id, data, identity)
    return jsonify(blog.model_dump())


@blogs_bp.delete("/<blog_id>")
@auth_required
def delete_blog(blog_id: str, identity: Identity):
    """
    Returns:
        204: No content (successful deletion)
        400: Malformed id
        401: Missing/invalid token
        403: Caller does not own the blog
        404: Blog not found
    """
    service.delete_blog(request_core(), blog_id, identity)
    return "", 204

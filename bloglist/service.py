"""Blog service: CRUD over blog records with validation and ownership checks.

Every function takes a db Core. Mutating operations also take the caller's
verified Identity; nothing is read from request context here.

Ownership rule: only the user whose id equals a blog's owner may update or
delete it.
"""

import logging

from .api.schemas import BlogCreate, BlogResponse, BlogUpdate, Identity, UserSummary
from .db import Core
from .exceptions import AuthenticationError, Forbidden, ResourceNotFound, ValidationError

logger = logging.getLogger(__name__)


def row_to_blog_response(row) -> BlogResponse:
    """
    Convert a row from core.blog reads to a BlogResponse.

    The owner's public fields come from the LEFT JOIN in BlogOperations;
    user is None for blogs without an owner.
    """
    user = None
    if row["owner"] is not None:
        user = UserSummary(
            id=row["owner"],
            username=row["owner_username"],
            name=row["owner_name"]
        )
    return BlogResponse(
        id=row["id"],
        title=row["title"],
        author=row["author"],
        url=row["url"],
        likes=row["likes"],
        user=user
    )


def _get_owned_blog(core: Core, blog_id: str, identity: Identity):
    row = core.blog.find_by_id(blog_id)
    if row is None:
        raise ResourceNotFound(f"Blog '{blog_id}' not found", {"blog_id": blog_id})

    if row["owner"] != identity.user_id:
        logger.warning(f"User {identity.user_id} denied access to blog {blog_id}")
        raise Forbidden(
            "only the creator can modify a blog",
            {"blog_id": blog_id}
        )
    return row


def list_blogs(core: Core) -> list[BlogResponse]:
    """All blogs in insertion order, each with its owner's public fields."""
    return [row_to_blog_response(row) for row in core.blog.find()]


def get_blog(core: Core, blog_id: str) -> BlogResponse:
    """
    Raises:
        MalformedId: If blog_id is not a well-formed id
        ResourceNotFound: If no blog has that id
    """
    row = core.blog.find_by_id(blog_id)
    if row is None:
        raise ResourceNotFound(f"Blog '{blog_id}' not found", {"blog_id": blog_id})
    return row_to_blog_response(row)


def create_blog(core: Core, data: BlogCreate, identity: Identity) -> BlogResponse:
    """
    Create a blog owned by the caller and attribute it to the caller's user.

    The blog is inserted first and then appended to the owner's blogs
    collection. Pass an atomic Core to commit both steps together.

    Raises:
        ValidationError: If title or url is missing or empty
        AuthenticationError: If the identity does not match an existing user
    """
    missing = [field for field in ("title", "url") if not getattr(data, field)]
    if missing:
        raise ValidationError("title and url are required", {"missing": missing})

    user = core.user.find_by_id(identity.user_id)
    if user is None:
        logger.warning(f"Token identifies unknown user {identity.user_id}")
        raise AuthenticationError("user not found", {"user_id": identity.user_id})

    blog_id = core.blog.insert(
        title=data.title,
        author=data.author,
        url=data.url,
        likes=data.likes or 0,
        owner=user["id"]
    )
    core.user.append_blog(user["id"], blog_id)

    logger.info(f"Blog {blog_id} created by {user['username']}")
    return row_to_blog_response(core.blog.find_by_id(blog_id))


def update_blog(core: Core, blog_id: str, data: BlogUpdate, identity: Identity) -> BlogResponse:
    """
    Apply a partial update. Only fields present and non-null in data change.

    Raises:
        MalformedId: If blog_id is not a well-formed id
        ResourceNotFound: If no blog has that id
        Forbidden: If the caller does not own the blog
    """
    _get_owned_blog(core, blog_id, identity)

    row = core.blog.update_by_id(
        blog_id,
        data.model_dump(exclude_unset=True, exclude_none=True)
    )
    if row is None:
        raise ResourceNotFound(f"Blog '{blog_id}' not found", {"blog_id": blog_id})
    return row_to_blog_response(row)


def delete_blog(core: Core, blog_id: str, identity: Identity) -> None:
    """
    Raises:
        MalformedId: If blog_id is not a well-formed id
        ResourceNotFound: If no blog has that id
        Forbidden: If the caller does not own the blog
    """
    _get_owned_blog(core, blog_id, identity)
    core.blog.delete_by_id(blog_id)
    logger.info(f"Blog {blog_id} deleted by {identity.user_id}")

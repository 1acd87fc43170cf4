"""Blog collection operations.

IMPORT CONVENTION:
- Core accesses these through core.blog property
- NO direct import needed when using Core API

Every read returns rows joined with the owning user's public fields
(owner_username, owner_name) so callers can render the user projection
without a second query. Password material is never selected.

ID POLICY:
Blog ids are UUID v4 strings generated here on insert. Lookups by an id
that is not a well-formed UUID raise MalformedId rather than returning None.
"""

import sqlite3
from typing import Any

from . import query
from ..exceptions import MalformedId
from ..utils import isodatetime, uid

_SELECT = """
    SELECT b.id, b.title, b.author, b.url, b.likes, b.owner,
           b.created_at, b.updated_at,
           u.username AS owner_username, u.name AS owner_name
    FROM blogs b
    LEFT JOIN users u ON u.id = b.owner
"""

_PARAM_MAP = {
    "id": "b.id = ?",
    "owner": "b.owner = ?",
    "title": "b.title = ?",
    "author": "b.author = ?",
    "url": "b.url = ?",
}


def check_id(blog_id: str) -> None:
    """Raise MalformedId unless blog_id is a well-formed UUID."""
    if not uid.is_valid_uuid(blog_id):
        raise MalformedId(
            f"Malformed blog id '{blog_id}'",
            {"blog_id": blog_id}
        )


class BlogOperations:
    """Blog operations over the blogs table."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def find(self, **conditions: Any) -> list[sqlite3.Row]:
        """Find blogs matching equality conditions, in insertion order.

        Args:
            **conditions: Field filters (id, owner, title, author, url).
                None values are ignored, so find() returns every blog.
        """
        unknown = set(conditions) - set(_PARAM_MAP)
        if unknown:
            raise ValueError(f"Unsupported blog filter(s): {sorted(unknown)}")

        where_clause, params = query.build_where_clause(conditions, _PARAM_MAP)
        return self._conn.execute(
            f"{_SELECT} WHERE {where_clause} ORDER BY b.rowid",
            params
        ).fetchall()

    def find_by_id(self, blog_id: str) -> sqlite3.Row | None:
        """Get blog by id, or None if no blog has that id.

        Raises:
            MalformedId: If blog_id is not a well-formed UUID
        """
        check_id(blog_id)
        return self._conn.execute(
            f"{_SELECT} WHERE b.id = ?",
            (blog_id,)
        ).fetchone()

    def insert(
        self,
        title: str,
        url: str,
        author: str | None = None,
        likes: int = 0,
        owner: str | None = None
    ) -> str:
        """Insert a blog and return its auto-generated id."""
        blog_id = uid.generate_uuid()
        now = isodatetime.now()
        self._conn.execute(
            """INSERT INTO blogs (id, title, author, url, likes, owner, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
            (blog_id, title, author, url, likes, owner, now, now)
        )
        return blog_id

    def update_by_id(self, blog_id: str, data: dict[str, Any]) -> sqlite3.Row | None:
        """Update the given fields of a blog and return the new row.

        Args:
            blog_id: The UUID of the blog
            data: Field names to new values. None values, 'id' and 'owner'
                are never written.

        Returns:
            The updated row, or None if no blog has that id

        Raises:
            MalformedId: If blog_id is not a well-formed UUID
        """
        check_id(blog_id)
        update_clause, params = query.build_update_clause(
            data,
            exclude={"id", "owner", "created_at", "updated_at"}
        )

        if update_clause:
            params.extend([isodatetime.now(), blog_id])
            self._conn.execute(
                f"UPDATE blogs SET {update_clause}, updated_at = ? WHERE id = ?",
                params
            )

        return self.find_by_id(blog_id)

    def delete_by_id(self, blog_id: str) -> bool:
        """Delete a blog. Returns True if a row was removed.

        Raises:
            MalformedId: If blog_id is not a well-formed UUID
        """
        check_id(blog_id)
        cursor = self._conn.execute("DELETE FROM blogs WHERE id = ?", (blog_id,))
        return cursor.rowcount > 0

    def count(self) -> int:
        return self._conn.execute("SELECT COUNT(*) FROM blogs").fetchone()[0]

"""User collection operations.

IMPORT CONVENTION:
- Core accesses these through core.user property

A user's ordered `blogs` collection lives in the user_blogs link table;
append_blog() adds to it and blog_ids() reads it back in insertion order.
Rows returned by find/find_by_id include password_hash. Callers convert
them to response schemas before anything leaves the process.
"""

import sqlite3
from typing import Any

from . import query
from ..utils import isodatetime, uid


class UserOperations:
    """User operations over the users and user_blogs tables."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def find(self, **conditions: Any) -> list[sqlite3.Row]:
        """Find users matching equality conditions, oldest first."""
        where_clause, params = query.build_where_clause(
            conditions,
            {"id": "id = ?", "username": "username = ?"}
        )
        return self._conn.execute(
            f"SELECT * FROM users WHERE {where_clause} ORDER BY created_at, rowid",
            params
        ).fetchall()

    def find_by_id(self, user_id: str) -> sqlite3.Row | None:
        return self._conn.execute(
            "SELECT * FROM users WHERE id = ?",
            (user_id,)
        ).fetchone()

    def find_by_username(self, username: str) -> sqlite3.Row | None:
        return self._conn.execute(
            "SELECT * FROM users WHERE username = ?",
            (username,)
        ).fetchone()

    def insert(self, username: str, password_hash: str, name: str | None = None) -> str:
        """Insert a user and return the auto-generated id.

        Raises:
            sqlite3.IntegrityError: If username is already taken
        """
        user_id = uid.generate_uuid()
        self._conn.execute(
            """INSERT INTO users (id, username, name, password_hash, created_at)
               VALUES (?, ?, ?, ?, ?)""",
            (user_id, username, name, password_hash, isodatetime.now())
        )
        return user_id

    def append_blog(self, user_id: str, blog_id: str) -> None:
        """Append blog_id to the end of the user's blogs collection."""
        self._conn.execute(
            "INSERT INTO user_blogs (user_id, blog_id) VALUES (?, ?)",
            (user_id, blog_id)
        )

    def blog_ids(self, user_id: str) -> list[str]:
        """Blog ids owned by the user, in the order they were attributed."""
        rows = self._conn.execute(
            "SELECT blog_id FROM user_blogs WHERE user_id = ? ORDER BY position",
            (user_id,)
        ).fetchall()
        return [row["blog_id"] for row in rows]

    def blogs(self, user_id: str) -> list[sqlite3.Row]:
        """Blogs in the user's collection, in collection order."""
        return self._conn.execute(
            """SELECT b.id, b.title, b.author, b.url, b.likes
               FROM user_blogs ub
               JOIN blogs b ON b.id = ub.blog_id
               WHERE ub.user_id = ?
               ORDER BY ub.position""",
            (user_id,)
        ).fetchall()

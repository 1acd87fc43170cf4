"""Database module for the blog list API.

Core encapsulates one SQLite connection and exposes per-collection
operations through properties:

    core.blog   - BlogOperations (find, find_by_id, insert, update_by_id, delete_by_id)
    core.user   - UserOperations (find, find_by_id, insert, append_blog, ...)

CONNECTION MODES:
- atomic=False: autocommit, every statement commits on its own.
- atomic=True: Core MUST be used as a context manager; all statements
  commit together on exit or roll back if the block raises.

    with get_core(settings.database_path, atomic=True) as core:
        blog_id = core.blog.insert(title="...", url="...", owner=user_id)
        core.user.append_blog(user_id, blog_id)

Within a request, views obtain an autocommit Core through
api.request_core(), which closes it on app context teardown.
"""

import logging
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from ..exceptions import DatabaseError
from ..schema import SCHEMA_PATH

if TYPE_CHECKING:
    from .blog import BlogOperations
    from .user import UserOperations

logger = logging.getLogger(__name__)


class Core:
    """
    Database Core with collection operations.

    Maintains its own connection and transaction state.
    Provides access to collection operations through properties.
    """

    def __init__(self, connection: sqlite3.Connection, atomic: bool = False):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
            atomic: If True, Core MUST be used as context manager.
                    If False, Core has autocommit semantics.
        """
        self._conn = connection
        self._atomic = atomic
        self._blog_ops = None
        self._user_ops = None

    @property
    def blog(self) -> "BlogOperations":
        """Blog operations, created on first access."""
        if self._blog_ops is None:
            from .blog import BlogOperations
            self._blog_ops = BlogOperations(self._conn)
        return self._blog_ops

    @property
    def user(self) -> "UserOperations":
        """User operations, created on first access."""
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "Core":
        """Enter context manager for atomic transaction.

        Raises:
            RuntimeError: If Core was not created with atomic=True
        """
        if not self._atomic:
            raise RuntimeError(
                "Core must be created with atomic=True for context manager use. "
                "Use: with get_core(path, atomic=True) as core:"
            )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Commit on success, roll back on exception, always close."""
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                logger.warning(f"Rolling back transaction: {exc_type.__name__}")
                self._conn.rollback()
        finally:
            self._conn.close()


def _create_connection(database_path: str, atomic: bool = False) -> sqlite3.Connection:
    """Create a fresh database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row
        and foreign keys enabled.

    Raises:
        DatabaseError: If the database file cannot be opened
    """
    db_path = Path(database_path)
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        # isolation_level=None puts the connection in autocommit mode
        conn = sqlite3.connect(
            str(db_path),
            isolation_level="DEFERRED" if atomic else None
        )
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
    except (OSError, sqlite3.Error) as e:
        logger.error(f"Cannot open database {database_path}: {e}")
        raise DatabaseError(
            "Storage is unavailable",
            {"database_path": database_path}
        ) from e
    return conn


def get_core(database_path: str, atomic: bool = False) -> Core:
    """
    Get a database Core instance.

    Args:
        database_path: Path of the SQLite database file
        atomic: If True, returns a Core that MUST be used as context manager.
                If False (default), returns a Core with autocommit semantics;
                the caller closes it with core.close().

    Returns:
        Core instance with blog/user operations
    """
    conn = _create_connection(database_path, atomic=atomic)
    return Core(conn, atomic=atomic)


# ============================================================================
# DATABASE INITIALIZATION
# ============================================================================

def init_db(database_path: str) -> None:
    """Initialize database by running schema.sql if not already initialized."""
    db_path = Path(database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    db = sqlite3.connect(str(db_path))
    try:
        cursor = db.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            # Database already initialized, skip
            return

        db.executescript(SCHEMA_PATH.read_text())
        db.commit()
        logger.info(f"Applied schema to {database_path}")
    finally:
        db.close()

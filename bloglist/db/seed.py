"""Seed the database with a sample user and blogs for development.

Usage:
    python -m bloglist.db.seed

Skips seeding when the sample user already exists.
"""

import asyncio
import logging

import aiosqlite

from ..auth.service import hash_password
from ..config import Settings
from ..utils import isodatetime, uid
from . import init_db

logger = logging.getLogger(__name__)

SAMPLE_USER = {"username": "root", "name": "Superuser", "password": "sekret"}

SAMPLE_BLOGS = [
    {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
    },
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
]


async def seed(database_path: str, work_factor: int = 12) -> int:
    """Insert the sample user and blogs. Returns the number of blogs created."""
    init_db(database_path)

    async with aiosqlite.connect(database_path) as db:
        await db.execute("PRAGMA foreign_keys = ON")

        cursor = await db.execute(
            "SELECT id FROM users WHERE username = ?",
            (SAMPLE_USER["username"],)
        )
        if await cursor.fetchone():
            logger.info("Sample data already present, skipping")
            return 0

        now = isodatetime.now()
        user_id = uid.generate_uuid()
        await db.execute(
            """INSERT INTO users (id, username, name, password_hash, created_at)
               VALUES (?, ?, ?, ?, ?)""",
            (
                user_id,
                SAMPLE_USER["username"],
                SAMPLE_USER["name"],
                hash_password(SAMPLE_USER["password"], work_factor),
                now,
            )
        )

        for blog in SAMPLE_BLOGS:
            blog_id = uid.generate_uuid()
            await db.execute(
                """INSERT INTO blogs (id, title, author, url, likes, owner, created_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?, ?)""",
                (blog_id, blog["title"], blog["author"], blog["url"], blog["likes"],
                 user_id, now, now)
            )
            await db.execute(
                "INSERT INTO user_blogs (user_id, blog_id) VALUES (?, ?)",
                (user_id, blog_id)
            )

        await db.commit()

    logger.info(f"Seeded user '{SAMPLE_USER['username']}' with {len(SAMPLE_BLOGS)} blogs")
    return len(SAMPLE_BLOGS)


def main():
    settings = Settings()
    logging.basicConfig(level=settings.log_level)
    asyncio.run(seed(settings.database_path, settings.bcrypt_work_factor))


if __name__ == "__main__":
    main()

"""Async database connection management.

Provides async database connectivity using aiosqlite. A single
``Database`` handle owns one connection; whoever opens it closes it.
"""
import sqlite3
from pathlib import Path
from urllib.parse import urlparse

import aiosqlite

SCHEMA = """
    CREATE TABLE IF NOT EXISTS posts (
        id TEXT PRIMARY KEY,
        title TEXT NOT NULL,
        author_first_name TEXT NOT NULL,
        author_last_name TEXT NOT NULL,
        content TEXT NOT NULL,
        created TEXT NOT NULL
    )
"""

MEMORY = ":memory:"


def parse_database_url(url: str) -> str:
    """Translate a database URL into an aiosqlite target.

    Accepts ``sqlite:///relative.db``, ``sqlite:////abs/path.db``,
    ``sqlite:///:memory:`` and bare filesystem paths.

    Raises:
        ValueError: for any other scheme
    """
    if "://" not in url:
        return url
    parsed = urlparse(url)
    if parsed.scheme != "sqlite":
        raise ValueError(f"Unsupported database URL: {url}")
    # sqlite:///x -> path "/x"; strip the separator slash only
    path = parsed.path[1:] if parsed.path.startswith("/") else parsed.path
    if not path:
        raise ValueError(f"Database URL has no path: {url}")
    return path


def database_path(url: str) -> Path | None:
    """Absolute file a database URL points at; None for in-memory databases.

    Relative paths resolve against the working directory, as sqlite does.
    """
    target = parse_database_url(url)
    if target == MEMORY:
        return None
    return Path(target).resolve()


def same_database(url: str, other: str) -> bool:
    """True when both URLs open the same database file."""
    path = database_path(url)
    return path is not None and path == database_path(other)


class Database:
    """Owned handle around a single aiosqlite connection.

    Examples:
        >>> db = await Database.connect("sqlite:///blog-test.db")
        >>> repo = PostRepository(db.connection)
        >>> await db.drop_database()
        >>> await db.close()
    """

    def __init__(self, url: str, connection: aiosqlite.Connection):
        self.url = url
        self._conn = connection

    @classmethod
    async def connect(cls, url: str) -> "Database":
        """Open a connection to ``url`` and make sure the schema exists."""
        target = parse_database_url(url)
        if target != MEMORY:
            Path(target).parent.mkdir(parents=True, exist_ok=True)
        conn = await aiosqlite.connect(target, detect_types=sqlite3.PARSE_DECLTYPES)
        conn.row_factory = aiosqlite.Row
        db = cls(url, conn)
        await db.init_schema()
        return db

    @property
    def connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError(f"Database {self.url} is closed")
        return self._conn

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    async def init_schema(self) -> None:
        """Create tables if they don't exist."""
        await self.connection.execute(SCHEMA)
        await self.connection.commit()

    async def drop_database(self) -> None:
        """Drop every table, then recreate an empty schema.

        All rows are gone after this returns; the handle stays usable.
        """
        conn = self.connection
        cursor = await conn.execute(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
        )
        tables = [row["name"] for row in await cursor.fetchall()]
        for table in tables:
            await conn.execute(f'DROP TABLE IF EXISTS "{table}"')
        await conn.commit()
        await self.init_schema()

    async def close(self) -> None:
        """Close the underlying connection."""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None

"""Post repository - handles all post-related database operations.

Posts are stored flat (author split into two columns) and rebuilt into
``Post`` models on the way out.
"""
import uuid
from datetime import datetime, timezone
from typing import Iterable, Optional

from ...models import AuthorName, Post, PostInput
from .base import AsyncRepository


class PostRepository(AsyncRepository):
    """Repository for blog posts.

    Examples:
        >>> repo = PostRepository(db.connection)
        >>> posts = await repo.insert_many([generate_post_data() for _ in range(3)])
        >>> await repo.count()
        3
        >>> await repo.find_by_id("missing") is None
        True
    """

    def _row_to_post(self, row: dict | None) -> Optional[Post]:
        if row is None:
            return None
        return Post(
            id=row["id"],
            title=row["title"],
            author=AuthorName(first_name=row["author_first_name"], last_name=row["author_last_name"]),
            content=row["content"],
            created=datetime.fromisoformat(row["created"]),
        )

    def _new_post(self, data: PostInput | dict) -> Post:
        if not isinstance(data, PostInput):
            data = PostInput.model_validate(data)
        return Post(
            id=uuid.uuid4().hex,
            title=data.title,
            author=data.author,
            content=data.content,
            created=datetime.now(timezone.utc),
        )

    async def create(self, data: PostInput | dict) -> Post:
        """Insert a single post.

        Args:
            data: Post input (model or plain dict with camelCase author keys)

        Returns:
            Stored post with generated id and created timestamp
        """
        posts = await self.insert_many([data])
        return posts[0]

    async def insert_many(self, records: Iterable[PostInput | dict]) -> list[Post]:
        """Insert posts in bulk and commit once.

        Args:
            records: Post inputs

        Returns:
            Stored posts in insertion order
        """
        posts = [self._new_post(record) for record in records]
        await self._execute_many(
            """INSERT INTO posts
               (id, title, author_first_name, author_last_name, content, created)
               VALUES (?, ?, ?, ?, ?, ?)""",
            [
                (
                    p.id, p.title, p.author.first_name, p.author.last_name,
                    p.content, p.created.isoformat()
                )
                for p in posts
            ]
        )
        await self._commit()
        return posts

    async def count(self) -> int:
        return await self._fetchvalue("SELECT COUNT(*) FROM posts")

    async def find_by_id(self, post_id: str) -> Optional[Post]:
        """Get post by ID, or None if it doesn't exist."""
        row = await self._fetchone("SELECT * FROM posts WHERE id = ?", (post_id,))
        return self._row_to_post(row)

    async def find_one(self) -> Optional[Post]:
        """Get any single post (the oldest inserted)."""
        row = await self._fetchone("SELECT * FROM posts ORDER BY rowid LIMIT 1")
        return self._row_to_post(row)

    async def find_all(self) -> list[Post]:
        rows = await self._fetchall("SELECT * FROM posts ORDER BY rowid")
        return [self._row_to_post(row) for row in rows]

    async def update(self, post_id: str, **kwargs) -> bool:
        """Update mutable post fields.

        Args:
            post_id: Post ID
            **kwargs: title, content and/or author (AuthorName)

        Returns:
            True if a row was changed
        """
        columns = {}
        if kwargs.get("title") is not None:
            columns["title"] = kwargs["title"]
        if kwargs.get("content") is not None:
            columns["content"] = kwargs["content"]
        author = kwargs.get("author")
        if author is not None:
            if not isinstance(author, AuthorName):
                author = AuthorName.model_validate(author)
            columns["author_first_name"] = author.first_name
            columns["author_last_name"] = author.last_name

        if not columns:
            return False

        set_clause = ", ".join(f"{k} = ?" for k in columns.keys())
        values = list(columns.values()) + [post_id]

        cursor = await self._execute(
            f"UPDATE posts SET {set_clause} WHERE id = ?",
            tuple(values)
        )
        await self._commit()
        return cursor.rowcount > 0

    async def delete(self, post_id: str) -> bool:
        """Delete post by ID.

        Returns:
            True if the post existed
        """
        cursor = await self._execute("DELETE FROM posts WHERE id = ?", (post_id,))
        await self._commit()
        return cursor.rowcount > 0

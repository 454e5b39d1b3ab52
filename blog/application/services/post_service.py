"""Post service - blog post business rules."""
import logging
from typing import Dict, List

from fastapi import HTTPException

from ...infrastructure.repositories import PostRepository
from ...models import PostInput, PostUpdate

logger = logging.getLogger(__name__)


class PostService:
    """Service for managing blog posts.

    Responsibilities:
    - List/read posts in their public shape
    - Create posts from validated input
    - Apply partial updates to mutable fields
    - Delete posts

    Raises HTTPException for anything the client got wrong.
    """

    def __init__(self, post_repository: PostRepository):
        self.post_repo = post_repository

    async def list_posts(self) -> List[Dict]:
        posts = await self.post_repo.find_all()
        return [post.serialize() for post in posts]

    async def get_post(self, post_id: str) -> Dict:
        post = await self.post_repo.find_by_id(post_id)
        if not post:
            raise HTTPException(404, "Post not found")
        return post.serialize()

    async def create_post(self, data: PostInput) -> Dict:
        post = await self.post_repo.create(data)
        logger.info("[posts] Created post %s", post.id)
        return post.serialize()

    async def update_post(self, post_id: str, data: PostUpdate) -> None:
        """Update mutable fields of an existing post.

        Args:
            post_id: ID from the request path
            data: Partial update; ``data.id``, when sent, must match ``post_id``

        Raises:
            HTTPException: 400 on id mismatch, 404 if the post doesn't exist
        """
        if data.id is not None and data.id != post_id:
            raise HTTPException(
                400,
                f"Request path id ({post_id}) and request body id ({data.id}) must match"
            )

        if not await self.post_repo.find_by_id(post_id):
            raise HTTPException(404, "Post not found")

        changes = data.changes()
        await self.post_repo.update(post_id, **changes)
        logger.info("[posts] Updated post %s: %s", post_id, sorted(changes))

    async def delete_post(self, post_id: str) -> None:
        if not await self.post_repo.delete(post_id):
            raise HTTPException(404, "Post not found")
        logger.info("[posts] Deleted post %s", post_id)

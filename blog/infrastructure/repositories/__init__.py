# Repository Pattern Implementation
"""
Repositories abstract database operations.
Each entity has its own repository.

Usage:
    repo = PostRepository(db.connection)
    post = await repo.find_by_id(post_id)
"""
from .base import AsyncRepository
from .post_repository import PostRepository

__all__ = [
    "AsyncRepository",
    "PostRepository",
]

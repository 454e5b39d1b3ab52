"""Application services - business logic layer."""

from .post_service import PostService

__all__ = [
    "PostService",
]

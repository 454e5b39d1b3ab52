"""Shared FastAPI dependencies."""
from fastapi import Depends, Request

from .application.services import PostService
from .infrastructure.database import Database
from .infrastructure.repositories import PostRepository


def get_database(request: Request) -> Database:
    """Database handle attached to the app at startup."""
    return request.app.state.database


def get_post_service(db: Database = Depends(get_database)) -> PostService:
    """Create PostService with repositories."""
    return PostService(post_repository=PostRepository(db.connection))

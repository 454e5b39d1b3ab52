"""Post routes - list, read, create, update, delete."""
from fastapi import APIRouter, Depends, Response

from ..application.services import PostService
from ..dependencies import get_post_service
from ..models import PostInput, PostOut, PostUpdate

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostOut])
async def list_posts(service: PostService = Depends(get_post_service)):
    """List every post."""
    return await service.list_posts()


@router.get("/{post_id}", response_model=PostOut)
async def get_post(post_id: str, service: PostService = Depends(get_post_service)):
    return await service.get_post(post_id)


@router.post("", status_code=201, response_model=PostOut)
async def create_post(data: PostInput, service: PostService = Depends(get_post_service)):
    """Create a post. Returns it with its generated id and timestamp."""
    return await service.create_post(data)


@router.put("/{post_id}", status_code=204)
async def update_post(post_id: str, data: PostUpdate, service: PostService = Depends(get_post_service)):
    """Update title, content and/or author of a post.

    Other keys in the body are ignored.
    """
    await service.update_post(post_id, data)
    return Response(status_code=204)


@router.delete("/{post_id}", status_code=204)
async def delete_post(post_id: str, service: PostService = Depends(get_post_service)):
    await service.delete_post(post_id)
    return Response(status_code=204)

"""/posts route module.

Reads are public. Mutations require a bearer token, and the author id always
comes from the verified claims.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from inkwell.adapters.api.dependencies import get_blog_service, get_container, get_current_user
from inkwell.adapters.api.v1.posts.schemas import PostListResponse, PostOut, PostRequest
from inkwell.core.container import ServiceContainer
from inkwell.domain.commands import MAX_ID, MIN_ID, CreatePostCommand, UpdatePostCommand
from inkwell.domain.services.blog_service import BlogService
from inkwell.domain.value_objects.claims import Claims
from inkwell.domain.value_objects.pagination import PageRequest

router = APIRouter(prefix="/posts", tags=["posts"])

PostId = Annotated[int, Path(ge=MIN_ID, le=MAX_ID)]


@router.post("", response_model=PostOut, status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: PostRequest,
    claims: Claims = Depends(get_current_user),
    blog_service: BlogService = Depends(get_blog_service),
):
    cmd = CreatePostCommand(title=payload.title, content=payload.content)
    post = await blog_service.create_post(claims.user_id, cmd)
    return PostOut.from_entity(post)


@router.get("", response_model=PostListResponse)
async def list_posts(
    limit: Optional[int] = Query(None, le=MAX_ID),
    offset: Optional[int] = Query(None, le=MAX_ID),
    container: ServiceContainer = Depends(get_container),
):
    """List posts newest first.

    ``limit`` defaults to the configured page size and is clamped to
    ``[1, max]``; a negative ``offset`` is treated as 0.
    """
    page_request = PageRequest.clamped(
        limit,
        offset,
        default_limit=container.default_page_limit,
        max_limit=container.max_page_limit,
    )
    page = await container.blog_service.list_posts(page_request)
    return PostListResponse.from_page(page)


@router.get("/{post_id}", response_model=PostOut)
async def get_post(post_id: PostId, blog_service: BlogService = Depends(get_blog_service)):
    post = await blog_service.get_post(post_id)
    return PostOut.from_entity(post)


@router.put("/{post_id}", response_model=PostOut)
async def update_post(
    post_id: PostId,
    payload: PostRequest,
    claims: Claims = Depends(get_current_user),
    blog_service: BlogService = Depends(get_blog_service),
):
    """Replace title and content of a post owned by the caller.

    Returns 403 when the post belongs to someone else and 404 when it does
    not exist.
    """
    cmd = UpdatePostCommand(title=payload.title, content=payload.content)
    post = await blog_service.update_post(post_id, claims.user_id, cmd)
    return PostOut.from_entity(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_post(
    post_id: PostId,
    claims: Claims = Depends(get_current_user),
    blog_service: BlogService = Depends(get_blog_service),
):
    await blog_service.delete_post(post_id, claims.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

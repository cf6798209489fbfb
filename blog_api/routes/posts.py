"""
Blog API: Post Route Handlers
===============================

What:  HTTP surface for posts:
           POST   /api/posts            create
           GET    /api/posts?page=N     list (Last-Page header)
           GET    /api/posts/{post_id}  read
           DELETE /api/posts/{post_id}  remove
           PATCH  /api/posts/{post_id}  partial update
How:   Reads path/query/body, calls PostService, hands the Result to `render`.

Request bodies are taken as raw JSON (`Body()` typed `Any`) so the
validation gate, not FastAPI's 422 handling, decides what is acceptable.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import Response

from blog_api.database import get_posts_collection
from blog_api.responses import render
from blog_api.schemas.post import ErrorResponse, PostResponse
from blog_api.services.post_service import post_service
from blog_api.validation import parse_page

router = APIRouter(prefix="/api", tags=["Posts"])


@router.post(
    "/posts",
    status_code=201,
    response_model=PostResponse,
    responses={
        400: {"description": "Invalid body", "model": ErrorResponse},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Create a post",
)
async def write_post(
    payload: Any = Body(default=None),
    collection=Depends(get_posts_collection),
) -> Response:
    result = await post_service.create(collection, payload)
    return render(result, status_code=201)


@router.get(
    "/posts",
    response_model=List[PostResponse],
    responses={
        200: {"description": "Newest posts first, body shortened to 200 characters"},
        400: {"description": "Page below 1"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="List posts, 10 per page",
    description=(
        "Returns up to 10 posts ordered by id, newest first. The `Last-Page` "
        "response header holds the highest valid page number."
    ),
)
async def list_posts(
    page: Optional[str] = Query(default=None, description="Page number, starting at 1"),
    tag: Optional[str] = Query(default=None, description="Only posts carrying this tag"),
    collection=Depends(get_posts_collection),
) -> Response:
    checked = parse_page(page)
    if not checked.ok:
        return render(checked)

    result = await post_service.list(collection, page=checked.value, tag=tag)
    return render(
        result,
        content=lambda post_page: post_page.posts,
        headers=lambda post_page: {"Last-Page": str(post_page.last_page)},
    )


@router.get(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses={
        400: {"description": "Malformed id"},
        404: {"description": "Post not found"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Get a single post",
)
async def read_post(
    post_id: str,
    collection=Depends(get_posts_collection),
) -> Response:
    result = await post_service.read(collection, post_id)
    return render(result)


@router.delete(
    "/posts/{post_id}",
    status_code=204,
    responses={
        400: {"description": "Malformed id"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Delete a post",
    description="Returns 204 whether or not the post existed.",
)
async def remove_post(
    post_id: str,
    collection=Depends(get_posts_collection),
) -> Response:
    result = await post_service.remove(collection, post_id)
    return render(result, status_code=204)


@router.patch(
    "/posts/{post_id}",
    response_model=PostResponse,
    responses={
        400: {"description": "Malformed id or invalid body", "model": ErrorResponse},
        404: {"description": "Post not found"},
        500: {"description": "Store error", "model": ErrorResponse},
    },
    summary="Update some fields of a post",
)
async def update_post(
    post_id: str,
    payload: Any = Body(default=None),
    collection=Depends(get_posts_collection),
) -> Response:
    result = await post_service.update(collection, post_id, payload)
    return render(result)

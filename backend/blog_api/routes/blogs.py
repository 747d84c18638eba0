"""
Blog API Backend - Blog Route Handlers
=======================================

What:  CRUD over the in-memory blog store.
How:   Thin handlers: decode inputs, call BlogStore, shape the response.
Who:   Any client holding a "Bearer ..." Authorization header.

Route Inventory:
    GET    /blogs        → 200 + list of blogs
    GET    /blogs/{id}   → 200 + blog           | 404 empty body
    POST   /blogs        → 201 + blog, Location | 500 on malformed body
    PUT    /blogs/{id}   → 200 + blog           | 404 empty body
    DELETE /blogs/{id}   → 204 no body          | 404 per delete bounds rule

404s are raised as BlogNotFoundError by the store and rendered by the
handler registered in main.py.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status

from blog_api.dependencies import get_store, read_blog_payload
from blog_api.schemas.blog import Blog, ErrorResponse
from blog_api.services.blog_store import BlogStore

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/blogs", tags=["Blogs"])

BLOG_BODY_SCHEMA = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": Blog.model_json_schema()}},
    }
}


@router.get(
    "",
    response_model=List[Blog],
    responses={401: {"model": ErrorResponse}},
    summary="List all blogs",
)
async def list_blogs(store: BlogStore = Depends(get_store)) -> List[Blog]:
    return store.list_all()


@router.get(
    "/{blog_id}",
    response_model=Blog,
    responses={
        401: {"model": ErrorResponse},
        404: {"description": "No blog at this index (empty body)"},
    },
    summary="Get a blog by index",
)
async def get_blog(blog_id: int, store: BlogStore = Depends(get_store)) -> Blog:
    return store.get(blog_id)


@router.post(
    "",
    response_model=Blog,
    status_code=status.HTTP_201_CREATED,
    responses={
        401: {"model": ErrorResponse},
        500: {"description": "Malformed body", "model": ErrorResponse},
    },
    summary="Append a blog",
    openapi_extra=BLOG_BODY_SCHEMA,
)
async def create_blog(
    response: Response,
    blog: Blog = Depends(read_blog_payload),
    store: BlogStore = Depends(get_store),
) -> Blog:
    """
    Append a blog to the end of the store.

    The Location header points at the new index (len(store) - 1).
    """
    blog_id, stored = store.create(blog)
    response.headers["Location"] = f"/blogs/{blog_id}"
    return stored


@router.put(
    "/{blog_id}",
    response_model=Blog,
    responses={
        401: {"model": ErrorResponse},
        404: {"description": "No blog at this index (empty body)"},
        500: {"description": "Malformed body", "model": ErrorResponse},
    },
    summary="Replace a blog by index",
    openapi_extra=BLOG_BODY_SCHEMA,
)
async def update_blog(
    blog_id: int,
    blog: Blog = Depends(read_blog_payload),
    store: BlogStore = Depends(get_store),
) -> Blog:
    return store.update(blog_id, blog)


@router.delete(
    "/{blog_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        401: {"model": ErrorResponse},
        404: {"description": "Rejected by the delete bounds rule (empty body)"},
    },
    summary="Delete a blog by index",
)
async def delete_blog(blog_id: int, store: BlogStore = Depends(get_store)) -> Response:
    """
    Remove the blog at blog_id. Later blogs shift down by one index.

    Which ids are accepted depends on settings.delete_bounds.
    """
    store.delete(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

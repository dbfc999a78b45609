"""
Bloglist Backend — Blog Route Handlers
=======================================

What:  HTTP surface of the blogs collection.
How:   Each request gets a BlogService wired to a request-scoped
       DocumentStore; handlers only pick status codes.
       The collection routes also answer on a trailing slash without a
       redirect.

    GET    /api/blogs          200  list
    GET    /api/blogs/{id}     200  | 400 malformed id | 404 missing
    POST   /api/blogs          201  | 400 missing title/author
    PUT    /api/blogs/{id}     200  | 400 unresolved id
    DELETE /api/blogs/{id}     204  always
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.database import get_db_session
from bloglist.models.blog import Blog
from bloglist.schemas.blog import BlogCreate, BlogResponse, BlogUpdate
from bloglist.schemas.common import ErrorResponse
from bloglist.services.blog_service import BlogService
from bloglist.store import DocumentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/blogs", tags=["Blogs"])


def get_blog_service(db: AsyncSession = Depends(get_db_session)) -> BlogService:
    return BlogService(DocumentStore(db, Blog))


@router.get("/", response_model=List[BlogResponse], include_in_schema=False)
@router.get(
    "",
    response_model=List[BlogResponse],
    summary="List all blogs",
)
async def list_blogs(service: BlogService = Depends(get_blog_service)) -> List[BlogResponse]:
    return await service.list_blogs()


@router.get(
    "/{blog_id}",
    response_model=BlogResponse,
    responses={
        400: {"description": "Malformed id", "model": ErrorResponse},
        404: {"description": "Blog not found", "model": ErrorResponse},
    },
    summary="Get a single blog by ID",
)
async def get_blog(
    blog_id: str,
    service: BlogService = Depends(get_blog_service),
) -> BlogResponse:
    return await service.get_blog(blog_id)


@router.post(
    "/",
    response_model=BlogResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=BlogResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Missing title or author", "model": ErrorResponse}},
    summary="Create a blog",
)
async def create_blog(
    payload: BlogCreate,
    service: BlogService = Depends(get_blog_service),
) -> BlogResponse:
    return await service.create_blog(payload)


@router.put(
    "/{blog_id}",
    response_model=BlogResponse,
    responses={400: {"description": "Unknown or malformed id", "model": ErrorResponse}},
    summary="Replace fields of a blog",
)
async def update_blog(
    blog_id: str,
    payload: BlogUpdate,
    service: BlogService = Depends(get_blog_service),
) -> BlogResponse:
    return await service.update_blog(blog_id, payload)


@router.delete(
    "/{blog_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a blog (idempotent)",
)
async def delete_blog(
    blog_id: str,
    service: BlogService = Depends(get_blog_service),
) -> Response:
    await service.delete_blog(blog_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""
Bloglist Backend — Blog Service (Blog Resource Handler)
========================================================

What:  Validates blog payloads, performs the store operation, and returns
       serialized documents.
How:   Receives its DocumentStore at construction; every method is
       validate → store operation → serialize.
Who:   Built per request by the /api/blogs route dependency.

Outcome mapping (turned into status codes by the routes and error handlers):
    list_blogs     → always succeeds
    get_blog       → ValidationError for malformed ids, NotFoundError for misses
    create_blog    → ValidationError when title/author missing; likes defaults to 0
    update_blog    → ValidationError when the id does not resolve (malformed or
                     missing alike) or a required field would be blanked
    delete_blog    → always succeeds, whether or not a document existed
Store failures propagate as DatabaseError.
"""

import logging
from typing import List

from bloglist.exceptions import NotFoundError, ValidationError
from bloglist.models.blog import Blog
from bloglist.object_id import is_valid_object_id
from bloglist.schemas.blog import BlogCreate, BlogResponse, BlogUpdate
from bloglist.serialization import to_json, to_json_list
from bloglist.store import DocumentStore
from bloglist.validation import validate_blog, validate_blog_update

logger = logging.getLogger(__name__)


def _serialize(blog: Blog) -> BlogResponse:
    return BlogResponse.model_validate(to_json(blog))


class BlogService:
    """Business logic for the `blogs` collection."""

    def __init__(self, store: DocumentStore[Blog]):
        self.store = store

    async def list_blogs(self) -> List[BlogResponse]:
        blogs = await self.store.find_all()
        return [BlogResponse.model_validate(doc) for doc in to_json_list(blogs)]

    async def get_blog(self, blog_id: str) -> BlogResponse:
        if not is_valid_object_id(blog_id):
            raise ValidationError(message="malformatted id", field="id")
        blog = await self.store.find_by_id(blog_id)
        if blog is None:
            raise NotFoundError(resource="blog", resource_id=blog_id)
        return _serialize(blog)

    async def create_blog(self, payload: BlogCreate) -> BlogResponse:
        """
        Persist a new blog.

        Raises:
            ValidationError: title or author absent/empty (store untouched)
            DatabaseError: the insert failed
        """
        data = payload.model_dump()
        validate_blog(data).raise_for_violations()

        blog = await self.store.insert(
            title=data["title"],
            author=data["author"],
            url=data.get("url"),
            likes=data.get("likes") or 0,
        )
        logger.info("Blog %s created: '%s' by %s", blog.doc_id, blog.title, blog.author)
        return _serialize(blog)

    async def update_blog(self, blog_id: str, payload: BlogUpdate) -> BlogResponse:
        """
        Replace the supplied fields of an existing blog.

        Fields absent from the request body are left untouched. A lookup miss
        is a client error (400), not a 404: malformed and unknown ids are
        treated the same.
        """
        changes = payload.model_dump(exclude_unset=True)
        validate_blog_update(changes).raise_for_violations()

        # likes: null resets to the creation default rather than violating NOT NULL
        if "likes" in changes and changes["likes"] is None:
            changes["likes"] = 0

        blog = await self.store.update_by_id(blog_id, changes)
        if blog is None:
            logger.info("Update rejected: blog id %r does not resolve", blog_id)
            raise ValidationError(
                message=f"blog with id '{blog_id}' does not exist",
                field="id",
            )
        return _serialize(blog)

    async def delete_blog(self, blog_id: str) -> None:
        removed = await self.store.delete_by_id(blog_id)
        if not removed:
            logger.debug("Delete of blog %r matched nothing", blog_id)

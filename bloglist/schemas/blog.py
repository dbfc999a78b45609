"""
Bloglist Backend — Blog Schemas
================================

What:  Request bodies for POST/PUT /api/blogs and the serialized Blog shape.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Upper bound of the 32-bit integer column
MAX_LIKES = 2**31 - 1


class BlogCreate(BaseModel):
    """
    What:  Body of POST /api/blogs.
    Who:   Parsed by the route, checked by validate_blog().

    title and author are required by validation, not by the schema.
    """
    title: Optional[str] = Field(default=None, description="Post title (required)")
    author: Optional[str] = Field(default=None, description="Post author (required)")
    url: Optional[str] = Field(default=None, description="Link to the post")
    likes: Optional[int] = Field(
        default=None, ge=0, le=MAX_LIKES, description="Like count; 0 when omitted"
    )


class BlogUpdate(BaseModel):
    """
    What:  Body of PUT /api/blogs/{id}.

    Only the fields present in the body are replaced
    (model_dump(exclude_unset=True)).
    """
    title: Optional[str] = Field(default=None, description="New title")
    author: Optional[str] = Field(default=None, description="New author")
    url: Optional[str] = Field(default=None, description="New link")
    likes: Optional[int] = Field(
        default=None, ge=0, le=MAX_LIKES, description="New like count"
    )


class BlogResponse(BaseModel):
    """
    What:  Externally visible Blog.
    Who:   Returned by every /api/blogs route that has a body.
    """
    id: str = Field(description="Store-assigned identifier")
    title: str = Field(description="Post title")
    author: str = Field(description="Post author")
    url: Optional[str] = Field(default=None, description="Link to the post")
    likes: int = Field(description="Like count")

"""
Bloglist Backend — Blog SQLAlchemy Model
=========================================

What:  ORM model representing the `blogs` document collection.
Who:   Stored and loaded through DocumentStore by BlogService.

Stored fields:
    _id     store-assigned identifier, immutable
    __v     internal version counter
    title   required, never empty
    author  required, never empty
    url     optional link to the post
    likes   integer, 0 when absent at creation
"""

from typing import Optional

from sqlalchemy import Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from bloglist.database import Base
from bloglist.object_id import OBJECT_ID_LENGTH, new_object_id


class Blog(Base):
    """
    A blog post recommendation.

    Lifecycle:
        1. Created by POST /api/blogs once title and author validate
        2. Mutated in place by PUT /api/blogs/{id} (full or partial replacement)
        3. Destroyed by DELETE /api/blogs/{id}; no soft-delete
    """

    __tablename__ = "blogs"

    doc_id: Mapped[str] = mapped_column(
        "_id",
        String(OBJECT_ID_LENGTH),
        primary_key=True,
        default=new_object_id,
    )

    version: Mapped[int] = mapped_column("__v", Integer, nullable=False)

    title: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    likes: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default=text("0"),
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<Blog(_id={self.doc_id}, title='{self.title}', likes={self.likes})>"

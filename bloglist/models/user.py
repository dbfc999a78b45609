"""
Bloglist Backend — User SQLAlchemy Model
=========================================

What:  ORM model representing the `users` document collection.

The plaintext password never reaches this model; only the bcrypt digest is
stored, under the field name `passwordHash`. The unique index on `username`
backs up the uniqueness check UserService performs before inserting.
"""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from bloglist.database import Base
from bloglist.object_id import OBJECT_ID_LENGTH, new_object_id


class User(Base):
    """A registered user. Created once; no update or delete operation."""

    __tablename__ = "users"

    doc_id: Mapped[str] = mapped_column(
        "_id",
        String(OBJECT_ID_LENGTH),
        primary_key=True,
        default=new_object_id,
    )

    version: Mapped[int] = mapped_column("__v", Integer, nullable=False)

    username: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )
    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    # bcrypt digests are 60 characters ($2b$<rounds>$<salt+hash>)
    password_hash: Mapped[str] = mapped_column("passwordHash", String(255), nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return f"<User(_id={self.doc_id}, username='{self.username}')>"

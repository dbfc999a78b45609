# Models package init
"""
Bloglist Backend — Document Models
===================================

Each model maps one document collection. Every collection shares the same
internal bookkeeping columns:

    _id   store-assigned identifier (see bloglist.object_id)
    __v   version counter, bumped by SQLAlchemy on every UPDATE

Neither column ever leaves the service: bloglist.serialization renames
`_id` to `id` and drops `__v`.
"""

from bloglist.models.blog import Blog
from bloglist.models.user import User

__all__ = ["Blog", "User"]

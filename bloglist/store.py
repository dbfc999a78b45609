"""
Bloglist Backend — Document Store Adapter
==========================================

What:  The find / save / update / delete interface the resource handlers use
       to reach persistence.
How:   Wraps one AsyncSession and one model class (one collection).
       Every operation flushes but never commits; the request-scoped session
       dependency in database.py commits once the handler has returned.
Who:   Built per request by the route dependencies and injected into
       BlogService / UserService at construction.

Operations:
    insert(**fields)            → new document with a store-assigned _id
    find_all()                  → every document, insertion order
    find_by_id(id)              → document or None (malformed ids included)
    find_one(**criteria)        → first document matching equality criteria
    update_by_id(id, changes)   → read-modify-write of at most one document
    delete_by_id(id)            → True if a document was removed

Failure mapping:
    IntegrityError    → DuplicateDocumentError (unique index violated)
    SQLAlchemyError   → DatabaseError
    Nothing is retried.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.database import Base
from bloglist.exceptions import DatabaseError
from bloglist.object_id import is_valid_object_id

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class DuplicateDocumentError(DatabaseError):
    """Raised when an insert violates a unique index of the collection."""

    def __init__(self, collection: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["collection"] = collection
        super().__init__(message=f"Duplicate document in '{collection}'", context=ctx)


class DocumentStore(Generic[T]):
    """
    Async CRUD access to a single document collection.

    Attributes:
        session:  Request-scoped AsyncSession
        model:    ORM class mapping the collection
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        self.session = session
        self.model = model

    @property
    def collection(self) -> str:
        return self.model.__tablename__

    @asynccontextmanager
    async def _operation(self, name: str, **context: Any) -> AsyncIterator[None]:
        """Translates driver errors raised inside the block into store errors."""
        try:
            yield
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning("%s on '%s' violated a unique index", name, self.collection)
            raise DuplicateDocumentError(self.collection, context={"operation": name, **context}) from e
        except SQLAlchemyError as e:
            logger.error(
                "Store %s on '%s' failed: %s", name, self.collection, str(e), exc_info=True
            )
            raise DatabaseError(
                context={
                    "operation": name,
                    "collection": self.collection,
                    "error_type": type(e).__name__,
                    **context,
                },
            ) from e

    async def insert(self, **fields: Any) -> T:
        document = self.model(**fields)
        async with self._operation("insert"):
            self.session.add(document)
            await self.session.flush()
        logger.info("Inserted %s into '%s'", document.doc_id, self.collection)
        return document

    async def find_all(self) -> List[T]:
        async with self._operation("find_all"):
            result = await self.session.execute(
                select(self.model).order_by(self.model.doc_id)
            )
            return list(result.scalars().all())

    async def find_by_id(self, doc_id: str) -> Optional[T]:
        """
        Fetch one document by identifier.

        Returns None both for identifiers that match nothing and for strings
        this store could never have issued; callers decide what a miss means.
        """
        if not is_valid_object_id(doc_id):
            logger.debug("Malformed id %r for '%s'", doc_id, self.collection)
            return None
        async with self._operation("find_by_id", doc_id=doc_id):
            return await self.session.get(self.model, doc_id.lower())

    async def find_one(self, **criteria: Any) -> Optional[T]:
        query = select(self.model).filter_by(**criteria).limit(1)
        async with self._operation("find_one"):
            result = await self.session.execute(query)
            return result.scalars().first()

    async def update_by_id(self, doc_id: str, changes: Dict[str, Any]) -> Optional[T]:
        """
        Apply `changes` to the document with `doc_id`.

        Read-modify-write of exactly one document; the version column is
        bumped by the flush. Returns the updated document, or None when the
        identifier does not resolve (nothing is written in that case).
        """
        document = await self.find_by_id(doc_id)
        if document is None:
            return None
        async with self._operation("update_by_id", doc_id=doc_id):
            for field, value in changes.items():
                setattr(document, field, value)
            await self.session.flush()
        logger.info("Updated %s in '%s' (%s)", doc_id, self.collection, ", ".join(sorted(changes)))
        return document

    async def delete_by_id(self, doc_id: str) -> bool:
        if not is_valid_object_id(doc_id):
            return False
        async with self._operation("delete_by_id", doc_id=doc_id):
            result = await self.session.execute(
                delete(self.model).where(self.model.doc_id == doc_id.lower())
            )
        removed = result.rowcount > 0
        if removed:
            logger.info("Deleted %s from '%s'", doc_id, self.collection)
        return removed

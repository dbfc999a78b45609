"""
Bloglist Backend — Serialization Layer
=======================================

What:  The boundary transform every outbound document passes through.
How:   1. Read the stored document under its stored field names
          (`_id`, `__v`, `passwordHash`, ...)
       2. Expose `_id` as `id` (string form)
       3. Drop the internal identifier and the version field
       4. Drop password material (`passwordHash`, `password`)
Who:   Called by BlogService and UserService for every document they return.

Nothing leaves the service without going through to_json(); the response
schemas then only describe the resulting shape.
"""

from typing import Any, Dict, Iterable, List

from sqlalchemy import inspect

INTERNAL_ID_FIELD = "_id"
VERSION_FIELD = "__v"
SENSITIVE_FIELDS = frozenset({"passwordHash", "password"})


def to_document(record: Any) -> Dict[str, Any]:
    """Returns the record as stored: a dict keyed by stored field names."""
    mapper = inspect(record).mapper
    return {
        attr.columns[0].name: getattr(record, attr.key)
        for attr in mapper.column_attrs
    }


def to_json(record: Any) -> Dict[str, Any]:
    """Externally visible representation of a stored document."""
    document = to_document(record)
    document["id"] = str(document.pop(INTERNAL_ID_FIELD))
    document.pop(VERSION_FIELD, None)
    for field in SENSITIVE_FIELDS:
        document.pop(field, None)
    return document


def to_json_list(records: Iterable[Any]) -> List[Dict[str, Any]]:
    return [to_json(record) for record in records]

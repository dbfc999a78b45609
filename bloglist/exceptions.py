"""
Bloglist Backend — Custom Exception Hierarchy
==============================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services and the document store; caught by global handlers.

Exception Hierarchy:
    BloglistError (base)
    ├── ValidationError   → 400 Bad Request (missing field, short value,
    │                        duplicate username, unresolvable update id)
    ├── NotFoundError     → 404 Not Found (GET by id only)
    └── DatabaseError     → 500 Internal Server Error (store failure)

Lookup misses during update and delete never surface as NotFoundError:
update reports them as ValidationError, delete reports success.
"""

from typing import Any, Dict, List, Optional


class BloglistError(Exception):
    """
    Base exception for all Bloglist application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BloglistError):
    """
    Raised when client input fails validation.

    HTTP:    400 Bad Request

    `violations` is the list of failed constraints, each a dict with
    `field` and `message`. It is returned to the client under `details`.

    Example response:
        {
            "error": "validation_error",
            "message": "username must be unique",
            "details": {"violations": [{"field": "username", "message": "..."}]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        violations: Optional[List[Dict[str, str]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if violations is None:
            violations = [{"field": field, "message": message}] if field else []
        if violations:
            ctx["violations"] = violations
        super().__init__(message=message, context=ctx)
        self.field = field
        self.violations = violations


class NotFoundError(BloglistError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/blogs/{id} with a well-formed id that matches nothing.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(BloglistError):
    """
    Raised when a document store operation fails unexpectedly.

    When:    Connection lost mid-query, unexpected constraint violation, etc.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; `context`
    (operation, collection, driver error type) is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

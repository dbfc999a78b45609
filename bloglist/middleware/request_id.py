"""
Bloglist Backend — Request ID Middleware
=========================================

What:  Assigns an id to each incoming request and returns it in the response.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates a short UUID; stores it in a ContextVar for loggers and
       error handlers, and in request.state for route handlers.
When:  Runs before the logging middleware, so access log lines carry the id.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that assigns a unique ID to each request for tracing."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 characters of a UUID4 are enough to correlate log lines
        rid = request.headers.get(REQUEST_ID_HEADER, str(uuid.uuid4())[:8])

        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response

"""
Bloglist Backend — Request Logging Middleware
==============================================

What:  One access log line for every HTTP request.
How:   Times the request, then logs method, path, status, duration, request
       id and client address. The level follows the status class:
       5xx → ERROR, 4xx → WARNING, otherwise INFO.
When:  After RequestIDMiddleware (uses request ID for correlation).

Logged:     method, path, status, duration, client IP, request ID
Not logged: request bodies (they carry plaintext passwords on POST /api/users)
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from bloglist.middleware.request_id import request_id_var

logger = logging.getLogger("bloglist.access")

# Probed every few seconds by orchestrators; not worth a log line
UNLOGGED_PATHS = frozenset({"/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs structured information about each HTTP request and response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = getattr(request.client, "host", "unknown") if request.client else "unknown"
        method = request.method
        path = request.url.path
        rid = request_id_var.get("")

        if path in UNLOGGED_PATHS:
            return await call_next(request)

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000

        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response

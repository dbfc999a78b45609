# Middleware package init
"""
Bloglist Backend — Middleware Package
======================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: generate correlation ID for logging and error bodies
    2. Logging: log request details with the generated request ID
    3. GZip / CORS: applied by Starlette/FastAPI middleware

    Responses travel the chain in reverse, so the X-Request-ID header is
    set and the duration is measured after the handler has finished.
"""

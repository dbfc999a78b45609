# Routes package init
"""
Bloglist Backend — API Routes Package
======================================

Route Inventory:
    - blogs.py:   GET/POST /api/blogs, GET/PUT/DELETE /api/blogs/{id}
    - users.py:   GET/POST /api/users
    - health.py:  GET /health

Routes are thin: they build the handler for the request, call it, and
choose the success status code. Failures are exceptions mapped to status
codes by the handlers registered in main.py.
"""

"""
Bloglist Backend — Application Package Initializer
===================================================

What: Marks the `bloglist` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend is a thin layered REST service:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Blog / User handlers)   │  ← Validation, hashing, status mapping
    ├─────────────────────────────────────┤
    │  Serialization  │  Schemas (Pydantic)│  ← Outbound document shape
    ├─────────────────────────────────────┤
    │     Document Store (store.py)       │  ← find / insert / update / delete
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the store directly; handlers never build HTTP responses.
"""

__version__ = "1.0.0"

# Schemas package init
"""
Bloglist Backend — Pydantic Request/Response Schemas
=====================================================

What:  The API contract between clients and the backend.
How:   FastAPI uses these models to parse request bodies, shape responses,
       and generate the OpenAPI document.

Request schemas only parse field types; every field is optional so that
missing values reach bloglist.validation and are reported as 400s.
Response schemas describe documents after bloglist.serialization.to_json().
"""

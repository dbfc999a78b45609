"""
Bloglist Backend — User Schemas
================================
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """
    What:  Body of POST /api/users.

    `password` only exists on this request model; it is hashed by
    UserService and never stored or echoed back.
    """
    username: Optional[str] = Field(default=None, description="Unique login name")
    name: Optional[str] = Field(default=None, description="Display name")
    password: Optional[str] = Field(default=None, description="Plaintext password")


class UserResponse(BaseModel):
    """Externally visible User: identifier, username and name only."""
    id: str = Field(description="Store-assigned identifier")
    username: str = Field(description="Unique login name")
    name: Optional[str] = Field(default=None, description="Display name")

"""
Bloglist Backend — User Service (User Resource Handler)
========================================================

What:  Lists users and creates new ones with a hashed password.
How:   validate → uniqueness lookup → hash (threadpool) → insert → serialize.
Who:   Built per request by the /api/users route dependency with the users
       DocumentStore and the process-wide PasswordHasher.

Creation checks, in order, each a distinct ValidationError:
    1. password present, NUL-free, and within settings.min_password_length
       and settings.max_password_length
    2. username at least settings.min_username_length long
    3. username not already stored

If the insert fails after hashing, the request simply fails: the digest is
discarded and nothing else has been written.
"""

import logging
from typing import List

from bloglist.config import settings
from bloglist.exceptions import ValidationError
from bloglist.models.user import User
from bloglist.schemas.user import UserCreate, UserResponse
from bloglist.security import PasswordHasher
from bloglist.serialization import to_json, to_json_list
from bloglist.store import DocumentStore, DuplicateDocumentError
from bloglist.validation import validate_user

logger = logging.getLogger(__name__)


class UserService:
    """Business logic for the `users` collection."""

    def __init__(
        self,
        store: DocumentStore[User],
        hasher: PasswordHasher,
        min_username_length: int = settings.min_username_length,
        min_password_length: int = settings.min_password_length,
        max_password_length: int = settings.max_password_length,
    ):
        self.store = store
        self.hasher = hasher
        self.min_username_length = min_username_length
        self.min_password_length = min_password_length
        self.max_password_length = max_password_length

    async def list_users(self) -> List[UserResponse]:
        users = await self.store.find_all()
        logger.debug("Fetched %d users", len(users))
        return [UserResponse.model_validate(doc) for doc in to_json_list(users)]

    async def create_user(self, payload: UserCreate) -> UserResponse:
        """
        Register a new user.

        Raises:
            ValidationError: password missing/short, username short, or taken
            DatabaseError: the store failed
        """
        data = payload.model_dump()
        validate_user(
            data,
            min_username_length=self.min_username_length,
            min_password_length=self.min_password_length,
            max_password_length=self.max_password_length,
        ).raise_for_violations()

        username = data["username"]
        if await self.store.find_one(username=username) is not None:
            raise _duplicate_username(username)

        password_hash = await self.hasher.hash(data["password"])

        try:
            user = await self.store.insert(
                username=username,
                name=data.get("name"),
                password_hash=password_hash,
            )
        except DuplicateDocumentError:
            # Lost a race with a concurrent registration of the same username
            raise _duplicate_username(username)

        logger.info("User %s created: %s", user.doc_id, user.username)
        return UserResponse.model_validate(to_json(user))


def _duplicate_username(username: str) -> ValidationError:
    logger.info("Registration rejected: username %r already exists", username)
    return ValidationError(message="username must be unique", field="username")

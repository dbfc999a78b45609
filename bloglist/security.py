"""
Bloglist Backend — Password Hashing
====================================

What:  One-way bcrypt hashing of user passwords before they are stored.
How:   passlib's CryptContext with the bcrypt scheme; the cost factor comes
       from settings.bcrypt_rounds. Hashing is CPU-bound, so hash() runs it
       in Starlette's threadpool and the request awaits the result.
Who:   UserService, once a creation payload has passed validation.
"""

import logging

from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from starlette.concurrency import run_in_threadpool

from bloglist.config import settings
from bloglist.exceptions import ValidationError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """bcrypt hasher with a fixed cost factor."""

    def __init__(self, rounds: int = settings.bcrypt_rounds):
        self.rounds = rounds
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    async def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Args:
            password: Plain text password

        Returns:
            bcrypt digest (never equal to the input)

        Raises:
            ValidationError: bcrypt refused the password
        """
        try:
            hashed = await run_in_threadpool(self.pwd_context.hash, password)
        except PasswordValueError as e:
            # NUL bytes, or more than passlib's 4096-character ceiling
            logger.info("Password rejected by bcrypt: %s", type(e).__name__)
            raise ValidationError(message=str(e), field="password")
        except Exception as e:
            logger.error("Password hashing failed: %s", type(e).__name__)
            raise
        logger.debug("Password hashed with %d rounds", self.rounds)
        return hashed

    def verify(self, password: str, password_hash: str) -> bool:
        return self.pwd_context.verify(password, password_hash)


password_hasher = PasswordHasher()

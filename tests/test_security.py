"""
Bloglist Backend — Password Hasher Tests
=========================================
"""

import pytest

from bloglist.exceptions import ValidationError
from bloglist.security import PasswordHasher


class TestPasswordHasher:

    def setup_method(self):
        self.hasher = PasswordHasher(rounds=4)

    @pytest.mark.asyncio
    async def test_hash_is_not_plaintext(self):
        hashed = await self.hasher.hash("123456")

        assert hashed != "123456"
        assert hashed.startswith("$2")

    @pytest.mark.asyncio
    async def test_hash_uses_configured_rounds(self):
        hashed = await self.hasher.hash("123456")

        assert hashed.split("$")[2] == "04"

    @pytest.mark.asyncio
    async def test_verify(self):
        hashed = await self.hasher.hash("123456")

        assert self.hasher.verify("123456", hashed)
        assert not self.hasher.verify("1234567", hashed)

    @pytest.mark.asyncio
    async def test_salted(self):
        assert await self.hasher.hash("123456") != await self.hasher.hash("123456")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["abc\x00def", "x" * 5000])
    async def test_refused_password_is_a_validation_error(self, password):
        with pytest.raises(ValidationError) as exc_info:
            await self.hasher.hash(password)

        assert exc_info.value.field == "password"

"""
Bloglist Backend — User API Tests
==================================

What:  End-to-end tests of /api/users.
How:   Every test starts with one stored user, "bananica".

What we test:
    ✅ Valid registration returns 201 and stores exactly one user
    ✅ Missing / short / bcrypt-incompatible password, short username, taken username → 400
    ✅ Password material never appears in responses; only the hash is stored
"""

import pytest

from bloglist.security import PasswordHasher


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_succeeds_with_valid_data(self, test_client, existing_user, users_in_db):
        users_at_start = await users_in_db()
        user = {"username": "lubenica", "name": "Jagoda Banana", "password": "123456"}

        response = await test_client.post("/api/users", json=user)

        assert response.status_code == 201
        users_at_end = await users_in_db()
        assert len(users_at_end) == len(users_at_start) + 1
        assert user["username"] in [u.username for u in users_at_end]

    @pytest.mark.asyncio
    async def test_response_has_no_password_material(self, test_client, existing_user):
        response = await test_client.post(
            "/api/users",
            json={"username": "lubenica", "name": "Jagoda Banana", "password": "123456"},
        )

        body = response.json()
        assert set(body) == {"id", "username", "name"}
        assert "123456" not in response.text

    @pytest.mark.asyncio
    async def test_stores_verifiable_hash_not_plaintext(self, test_client, existing_user, users_in_db):
        await test_client.post(
            "/api/users",
            json={"username": "lubenica", "name": "Jagoda Banana", "password": "123456"},
        )

        stored = {u.username: u for u in await users_in_db()}["lubenica"]
        assert stored.password_hash != "123456"
        assert PasswordHasher(rounds=4).verify("123456", stored.password_hash)

    @pytest.mark.asyncio
    async def test_returns_400_if_password_is_missing(self, test_client, existing_user, count_users):
        users_at_start = await count_users()

        response = await test_client.post(
            "/api/users", json={"username": "jagodicabobica", "name": "Jagoda J."}
        )

        assert response.status_code == 400
        assert response.json()["details"]["violations"][0]["field"] == "password"
        assert await count_users() == users_at_start

    @pytest.mark.asyncio
    async def test_returns_400_if_password_is_too_short(self, test_client, existing_user, count_users):
        users_at_start = await count_users()

        response = await test_client.post(
            "/api/users", json={"username": "jagodicabobica", "name": "Jagoda J.", "password": "12"}
        )

        assert response.status_code == 400
        assert await count_users() == users_at_start

    @pytest.mark.asyncio
    async def test_returns_400_with_invalid_username(self, test_client, existing_user, count_users):
        users_at_start = await count_users()

        response = await test_client.post(
            "/api/users", json={"username": "ab", "name": "x", "password": "123456"}
        )

        assert response.status_code == 400
        assert response.json()["details"]["violations"][0]["field"] == "username"
        assert await count_users() == users_at_start

    @pytest.mark.asyncio
    async def test_returns_400_with_existing_username(self, test_client, existing_user, count_users):
        users_at_start = await count_users()

        response = await test_client.post(
            "/api/users",
            json={"username": "bananica", "name": "Ana Druga", "password": "123456789"},
        )

        assert response.status_code == 400
        assert "unique" in response.json()["message"]
        assert await count_users() == users_at_start

    @pytest.mark.asyncio
    @pytest.mark.parametrize("password", ["abc\x00def", "x" * 5000, "é" * 40])
    async def test_returns_400_if_bcrypt_cannot_take_password(self, test_client, existing_user, count_users, password):
        users_at_start = await count_users()

        response = await test_client.post(
            "/api/users", json={"username": "jagodicabobica", "name": "Jagoda J.", "password": password}
        )

        assert response.status_code == 400
        assert response.json()["details"]["violations"][0]["field"] == "password"
        assert await count_users() == users_at_start

    @pytest.mark.asyncio
    async def test_trailing_slash_is_not_redirected(self, test_client, existing_user, count_users):
        users_at_start = await count_users()

        response = await test_client.post(
            "/api/users/",
            json={"username": "lubenica", "name": "Jagoda Banana", "password": "123456"},
        )

        assert response.status_code == 201
        assert await count_users() == users_at_start + 1


class TestListUsers:

    @pytest.mark.asyncio
    async def test_lists_serialized_users(self, test_client, existing_user):
        response = await test_client.get("/api/users")

        assert response.status_code == 200
        assert response.json() == [
            {"id": existing_user.doc_id, "username": "bananica", "name": "Ana Banana"}
        ]

    @pytest.mark.asyncio
    async def test_no_users(self, test_client):
        response = await test_client.get("/api/users")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_trailing_slash_is_not_redirected(self, test_client, existing_user):
        response = await test_client.get("/api/users/")

        assert response.status_code == 200
        assert [u["username"] for u in response.json()] == ["bananica"]

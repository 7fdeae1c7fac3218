"""Integration tests for profile, settings, users, and account deletion.

Tests:
  - profile update; empty name keeps the old one
  - profile lookup and 404
  - language settings default, update, and validation
  - /users excludes the caller
  - DELETE /account removes the user's contacts, messages, and posts
"""

from __future__ import annotations

import uuid

import pytest
from sqlalchemy import func, select

from lingvo.models.contact import Contact
from lingvo.models.message import Message
from lingvo.models.post import Post
from lingvo.models.user import User


@pytest.mark.asyncio
class TestProfile:
    async def test_update_profile(self, client, auth_headers, alice) -> None:
        response = await client.put(
            "/profile",
            json={"name": "Alice L.", "bio": "Learning Russian", "avatar": "a.png"},
            headers=auth_headers(alice),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Alice L."
        assert body["bio"] == "Learning Russian"
        assert body["avatar"] == "a.png"

    async def test_empty_name_keeps_current(self, client, auth_headers, alice) -> None:
        response = await client.put(
            "/profile", json={"name": "", "bio": "hi"}, headers=auth_headers(alice)
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Alice"
        assert response.json()["bio"] == "hi"

    async def test_get_other_profile(self, client, auth_headers, alice, bob) -> None:
        response = await client.get(f"/profile/{bob.id}", headers=auth_headers(alice))

        assert response.status_code == 200
        assert response.json() == {
            "id": str(bob.id),
            "name": "Bob",
            "email": "bob@example.com",
            "avatar": None,
            "bio": None,
        }

    async def test_unknown_profile_is_404(self, client, auth_headers, alice) -> None:
        response = await client.get(
            f"/profile/{uuid.uuid4()}", headers=auth_headers(alice)
        )

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


@pytest.mark.asyncio
class TestSettings:
    async def test_get_language(self, client, auth_headers, bob) -> None:
        response = await client.get("/settings", headers=auth_headers(bob))

        assert response.json() == {"language": "ru"}

    async def test_update_language(self, client, auth_headers, bob) -> None:
        response = await client.put(
            "/settings", json={"language": "en"}, headers=auth_headers(bob)
        )

        assert response.status_code == 200
        assert response.json() == {"language": "en"}
        again = await client.get("/settings", headers=auth_headers(bob))
        assert again.json() == {"language": "en"}

    @pytest.mark.parametrize("payload", [{}, {"language": ""}, {"language": 5}])
    async def test_invalid_language_is_400(
        self, client, auth_headers, bob, payload
    ) -> None:
        response = await client.put("/settings", json=payload, headers=auth_headers(bob))

        assert response.status_code == 400
        assert "error" in response.json()


@pytest.mark.asyncio
class TestUsers:
    async def test_lists_everyone_but_caller(
        self, client, auth_headers, alice, bob, carol
    ) -> None:
        response = await client.get("/users", headers=auth_headers(alice))

        assert response.status_code == 200
        assert [u["name"] for u in response.json()] == ["Bob", "Carol"]


@pytest.mark.asyncio
class TestDeleteAccount:
    async def test_removes_owned_rows(
        self, client, auth_headers, session_factory, alice, bob, carol
    ) -> None:
        await client.post(
            "/contacts", json={"contactId": str(bob.id)}, headers=auth_headers(alice)
        )
        await client.post(
            "/contacts", json={"contactId": str(carol.id)}, headers=auth_headers(bob)
        )
        await client.post(
            "/messages",
            json={"receiverId": str(bob.id), "content": "hi"},
            headers=auth_headers(alice),
        )
        await client.post(
            "/messages",
            json={"receiverId": str(alice.id), "content": "hey"},
            headers=auth_headers(bob),
        )
        await client.post("/posts", json={"content": "bye"}, headers=auth_headers(alice))

        response = await client.delete("/account", headers=auth_headers(alice))

        assert response.status_code == 200
        assert response.json() == {"success": True}
        async with session_factory() as session:
            assert await session.get(User, alice.id) is None
            contacts = (await session.execute(select(Contact))).scalars().all()
            assert {(c.owner_id, c.contact_id) for c in contacts} == {
                (bob.id, carol.id),
                (carol.id, bob.id),
            }
            messages = (
                await session.execute(select(func.count()).select_from(Message))
            ).scalar_one()
            posts = (
                await session.execute(select(func.count()).select_from(Post))
            ).scalar_one()
        assert messages == 0
        assert posts == 0

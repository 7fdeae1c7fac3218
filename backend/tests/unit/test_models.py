"""Unit tests for ORM relationship loading.

Tests:
  - every relationship is lazy="raise" (loaded explicitly or not at all)
  - touching an unloaded relationship raises instead of returning None
"""

from __future__ import annotations

import pytest
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import InvalidRequestError

from lingvo.models.contact import Contact
from lingvo.models.message import Message
from lingvo.models.post import Post
from lingvo.models.user import User


@pytest.mark.parametrize("model", [User, Contact, Message, Post])
def test_relationships_raise_on_lazy_load(model) -> None:
    for rel in sa_inspect(model).relationships:
        assert rel.lazy == "raise", f"{model.__name__}.{rel.key}"


@pytest.mark.asyncio
async def test_unloaded_sender_raises(session_factory, alice, bob) -> None:
    async with session_factory() as session:
        message = Message(sender_id=alice.id, receiver_id=bob.id, content="hi")
        session.add(message)
        await session.commit()

    async with session_factory() as session:
        loaded = await session.get(Message, message.id)
        with pytest.raises(InvalidRequestError):
            loaded.sender

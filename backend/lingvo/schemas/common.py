"""Shared schema base classes.

The public API speaks camelCase JSON (``receiverId``, ``createdAt``);
Python code uses snake_case attributes.
"""

import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for every request/response body."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SuccessResponse(CamelModel):
    success: bool = True


class UserSummary(CamelModel):
    """Minimal user reference embedded in messages."""

    id: uuid.UUID
    name: str


class UserCard(CamelModel):
    """User as shown in lists (contacts, user directory)."""

    id: uuid.UUID
    name: str
    email: str
    avatar: str | None = None

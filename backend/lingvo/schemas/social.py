"""Contact, message, and post request/response schemas."""

import uuid
from datetime import datetime
from typing import Literal

from lingvo.schemas.common import CamelModel, UserSummary


class ContactRequest(CamelModel):
    """POST/DELETE /api/contacts request body."""

    contact_id: uuid.UUID | None = None


class ContactStatusResponse(CamelModel):
    """GET /api/contacts/check response body."""

    is_contact: bool


class MessageCreate(CamelModel):
    """POST /api/messages request body."""

    receiver_id: uuid.UUID | None = None
    content: str | None = None


class MessageResponse(CamelModel):
    """Single direct message with both participants' names."""

    id: uuid.UUID
    sender_id: uuid.UUID
    receiver_id: uuid.UUID
    content: str
    created_at: datetime
    sender: UserSummary
    receiver: UserSummary


class PostCreate(CamelModel):
    """POST /api/posts request body."""

    content: str | None = None
    media: str | None = None
    media_type: Literal["image", "video"] | None = None


class PostAuthor(CamelModel):
    id: uuid.UUID
    name: str
    avatar: str | None = None


class PostResponse(CamelModel):
    """Feed post with its author."""

    id: uuid.UUID
    author_id: uuid.UUID
    content: str | None = None
    media: str | None = None
    media_type: str | None = None
    created_at: datetime
    author: PostAuthor

"""Direct message storage between two users."""

from __future__ import annotations

from uuid import UUID

import structlog
from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lingvo.core.exceptions import UserNotFoundError
from lingvo.models.message import Message
from lingvo.models.user import User

logger = structlog.get_logger(__name__)


class MessageService:
    """Fetches and creates directed messages."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def list_conversation(self, user_id: UUID, other_id: UUID) -> list[Message]:
        """Every message user -> other or other -> user, oldest first."""
        result = await self._db.execute(
            select(Message)
            .where(
                or_(
                    and_(Message.sender_id == user_id, Message.receiver_id == other_id),
                    and_(Message.sender_id == other_id, Message.receiver_id == user_id),
                )
            )
            .options(selectinload(Message.sender), selectinload(Message.receiver))
            .order_by(Message.created_at.asc())
        )
        return list(result.scalars().all())

    async def send(self, sender: User, receiver_id: UUID, content: str) -> Message:
        """Persist one directed message and attach both participants."""
        receiver = await self._db.get(User, receiver_id)
        if receiver is None:
            raise UserNotFoundError("Receiver not found")

        message = Message(
            sender_id=sender.id,
            receiver_id=receiver.id,
            content=content,
        )
        message.sender = sender
        message.receiver = receiver
        self._db.add(message)
        await self._db.flush()

        logger.info(
            "message_sent",
            message_id=str(message.id),
            sender_id=str(sender.id),
            receiver_id=str(receiver.id),
        )
        return message

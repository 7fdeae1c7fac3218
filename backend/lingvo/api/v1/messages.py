"""Direct message endpoints.

Clients poll GET /messages?userId= for the open conversation; there is
no push channel.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from lingvo.api.deps import get_current_user, get_message_service
from lingvo.core.exceptions import InvalidRequestError
from lingvo.models.user import User
from lingvo.schemas.social import MessageCreate, MessageResponse
from lingvo.services.messages import MessageService

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("", response_model=list[MessageResponse])
async def list_messages(
    user_id: UUID | None = Query(None, alias="userId"),
    user: User = Depends(get_current_user),
    messages: MessageService = Depends(get_message_service),
) -> list[MessageResponse]:
    """Conversation between the caller and another user, oldest first."""
    if user_id is None:
        raise InvalidRequestError("User ID required")
    conversation = await messages.list_conversation(user.id, user_id)
    return [MessageResponse.model_validate(m) for m in conversation]


@router.post("", response_model=MessageResponse)
async def send_message(
    body: MessageCreate,
    user: User = Depends(get_current_user),
    messages: MessageService = Depends(get_message_service),
) -> MessageResponse:
    """Send a message to another user."""
    if body.receiver_id is None or not body.content:
        raise InvalidRequestError("Receiver and content required")
    message = await messages.send(
        sender=user,
        receiver_id=body.receiver_id,
        content=body.content,
    )
    return MessageResponse.model_validate(message)

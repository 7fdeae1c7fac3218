"""Profile, account, language settings, and user directory endpoints."""

from uuid import UUID

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from lingvo.api.deps import get_current_user, get_db
from lingvo.core.config import settings
from lingvo.core.exceptions import InvalidRequestError, UserNotFoundError
from lingvo.models.contact import Contact
from lingvo.models.message import Message
from lingvo.models.post import Post
from lingvo.models.user import User
from lingvo.schemas.common import SuccessResponse, UserCard
from lingvo.schemas.user import LanguageSettings, ProfileResponse, ProfileUpdate

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["profile"])


@router.get("/profile/{user_id}", response_model=ProfileResponse)
async def get_profile(
    user_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> ProfileResponse:
    """Public profile of any user."""
    profile = await db.get(User, user_id)
    if profile is None:
        raise UserNotFoundError()
    return ProfileResponse.model_validate(profile)


@router.put("/profile", response_model=ProfileResponse)
async def update_profile(
    body: ProfileUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> ProfileResponse:
    """Edit name, bio, and avatar.

    An empty name keeps the current one; empty bio or avatar clears it.
    """
    if body.name:
        user.name = body.name
    user.bio = body.bio or None
    user.avatar = body.avatar or None
    await db.flush()

    logger.info("profile_updated", user_id=str(user.id))
    return ProfileResponse.model_validate(user)


@router.delete("/account", response_model=SuccessResponse)
async def delete_account(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Delete the caller and everything they own.

    Rows are removed explicitly so the cascade does not depend on the
    database enforcing ON DELETE CASCADE.
    """
    await db.execute(
        delete(Contact).where(
            or_(Contact.owner_id == user.id, Contact.contact_id == user.id)
        )
    )
    await db.execute(
        delete(Message).where(
            or_(Message.sender_id == user.id, Message.receiver_id == user.id)
        )
    )
    await db.execute(delete(Post).where(Post.author_id == user.id))
    await db.delete(user)
    await db.flush()

    logger.info("account_deleted", user_id=str(user.id))
    return SuccessResponse()


@router.get("/settings", response_model=LanguageSettings)
async def get_settings(
    user: User = Depends(get_current_user),
) -> LanguageSettings:
    """Current UI language."""
    return LanguageSettings(language=user.language or settings.default_language)


@router.put("/settings", response_model=LanguageSettings)
async def update_settings(
    body: LanguageSettings,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> LanguageSettings:
    """Change UI language; chat messages are translated into it."""
    if not body.language:
        raise InvalidRequestError("Language is required")

    user.language = body.language
    await db.flush()

    logger.info("language_updated", user_id=str(user.id), language=body.language)
    return LanguageSettings(language=user.language)


@router.get("/users", response_model=list[UserCard])
async def list_users(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> list[UserCard]:
    """Every user except the caller."""
    result = await db.execute(
        select(User).where(User.id != user.id).order_by(User.name.asc())
    )
    return [UserCard.model_validate(u) for u in result.scalars().all()]

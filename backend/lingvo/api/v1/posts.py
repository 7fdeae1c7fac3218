"""Feed post endpoints."""

from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lingvo.api.deps import get_current_user, get_db
from lingvo.core.exceptions import (
    InvalidRequestError,
    PostNotFoundError,
    PostOwnershipError,
)
from lingvo.models.post import Post
from lingvo.models.user import User
from lingvo.schemas.common import SuccessResponse
from lingvo.schemas.social import PostCreate, PostResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(
    user_id: UUID | None = Query(None, alias="userId"),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> list[PostResponse]:
    """Posts by one author, newest first."""
    if user_id is None:
        raise InvalidRequestError("userId required")

    result = await db.execute(
        select(Post)
        .where(Post.author_id == user_id)
        .options(selectinload(Post.author))
        .order_by(Post.created_at.desc())
    )
    return [PostResponse.model_validate(p) for p in result.scalars().all()]


@router.post("", response_model=PostResponse)
async def create_post(
    body: PostCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> PostResponse:
    """Publish a post with text, media, or both."""
    if not body.content and not body.media:
        raise InvalidRequestError("Content or media required")
    if body.media and not body.media_type:
        raise InvalidRequestError("mediaType required when media is provided")

    post = Post(
        author_id=user.id,
        content=body.content or None,
        media=body.media or None,
        media_type=body.media_type if body.media else None,
    )
    post.author = user
    db.add(post)
    await db.flush()

    logger.info("post_created", post_id=str(post.id), author_id=str(user.id))
    return PostResponse.model_validate(post)


@router.delete("/{post_id}", response_model=SuccessResponse)
async def delete_post(
    post_id: UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> SuccessResponse:
    """Delete one of the caller's own posts."""
    post = await db.get(Post, post_id)
    if post is None:
        raise PostNotFoundError()
    if post.author_id != user.id:
        logger.warning(
            "post_delete_forbidden", post_id=str(post_id), user_id=str(user.id)
        )
        raise PostOwnershipError()

    await db.delete(post)
    await db.flush()

    logger.info("post_deleted", post_id=str(post_id), author_id=str(user.id))
    return SuccessResponse()

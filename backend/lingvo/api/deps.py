"""Shared FastAPI dependencies: auth, database sessions, service injection.

The TranslationProvider is created once during the FastAPI lifespan and
stored on app.state. All downstream code retrieves it via Depends(),
never by direct import.
"""

from uuid import UUID

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from lingvo.core.config import settings
from lingvo.core.exceptions import UnauthorizedError
from lingvo.core.security import decode_access_token
from lingvo.db.postgres import get_async_session
from lingvo.models.user import User
from lingvo.services.contacts import ContactService
from lingvo.services.language.translator import TranslationService
from lingvo.services.messages import MessageService
from lingvo.services.translation.base import TranslationProvider

logger = structlog.get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------

async def get_db(
    session: AsyncSession = Depends(get_async_session, scope="function"),
) -> AsyncSession:
    """Request session, committed as soon as the handler returns.

    scope="function" runs the session's commit before the response is
    sent, so a failed commit still becomes a 503 for the caller.
    """
    return session


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Authenticate the caller from the session cookie or a bearer token.

    The cookie is tried first; a stale or forged cookie falls through to
    the Authorization header instead of failing the request.
    """
    candidates = [
        request.cookies.get(settings.session_cookie_name),
        credentials.credentials if credentials else None,
    ]
    subject = None
    for token in candidates:
        if token:
            subject = decode_access_token(token)
            if subject is not None:
                break
    if subject is None:
        raise UnauthorizedError()

    try:
        user_id = UUID(subject)
    except ValueError:
        raise UnauthorizedError()

    user = await db.get(User, user_id)
    if user is None:
        # Token outlived its account
        logger.info("session_user_missing", user_id=subject)
        raise UnauthorizedError()

    return user


# ---------------------------------------------------------------------------
# Service singleton, retrieved from app.state (set during lifespan)
# ---------------------------------------------------------------------------

def get_translation_provider(request: Request) -> TranslationProvider:
    """Return the singleton translation provider from app state."""
    return request.app.state.translation_provider


# ---------------------------------------------------------------------------
# Service constructors, wired via Depends()
# ---------------------------------------------------------------------------

def get_translation_service(
    provider: TranslationProvider = Depends(get_translation_provider),
) -> TranslationService:
    """Return a TranslationService bound to the app's provider."""
    return TranslationService(provider=provider)


async def get_contact_service(
    db: AsyncSession = Depends(get_db),
) -> ContactService:
    """Return a ContactService instance."""
    return ContactService(db=db)


async def get_message_service(
    db: AsyncSession = Depends(get_db),
) -> MessageService:
    """Return a MessageService instance."""
    return MessageService(db=db)

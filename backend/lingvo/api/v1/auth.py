"""Registration and session endpoints."""

import structlog
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lingvo.api.deps import get_current_user, get_db
from lingvo.core.config import settings
from lingvo.core.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidRequestError,
)
from lingvo.core.security import create_access_token, hash_password, verify_password
from lingvo.models.user import User
from lingvo.schemas.common import SuccessResponse
from lingvo.schemas.user import (
    AccountResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["auth"])


def _normalize_email(email: str) -> str:
    return email.strip().lower()


@router.post(
    "/register",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db),
) -> AccountResponse:
    """Create a new account."""
    if not body.name or not body.email or not body.password:
        raise InvalidRequestError("Name, email and password are required")

    email = _normalize_email(body.email)
    result = await db.execute(select(User.id).where(func.lower(User.email) == email))
    if result.scalar_one_or_none() is not None:
        raise EmailAlreadyRegisteredError()

    user = User(
        name=body.name.strip(),
        email=email,
        password_hash=hash_password(body.password),
        language=settings.default_language,
    )
    db.add(user)
    await db.flush()

    logger.info("user_registered", user_id=str(user.id))
    return AccountResponse.model_validate(user)


@router.post("/auth/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """Exchange email and password for a session token.

    The token is returned in the body for API clients and set as an
    HttpOnly cookie for browsers.
    """
    if not body.email or not body.password:
        raise InvalidRequestError("Email and password are required")

    result = await db.execute(
        select(User).where(func.lower(User.email) == _normalize_email(body.email))
    )
    user = result.scalar_one_or_none()
    if user is None or not verify_password(body.password, user.password_hash):
        raise InvalidCredentialsError()

    token = create_access_token(str(user.id))
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )

    logger.info("user_logged_in", user_id=str(user.id))
    return LoginResponse(
        access_token=token,
        user=AccountResponse.model_validate(user),
    )


@router.post("/auth/logout", response_model=SuccessResponse)
async def logout(response: Response) -> SuccessResponse:
    """Clear the session cookie."""
    response.delete_cookie(settings.session_cookie_name)
    return SuccessResponse()


@router.get("/auth/me", response_model=AccountResponse)
async def me(user: User = Depends(get_current_user)) -> AccountResponse:
    """Return the authenticated user."""
    return AccountResponse.model_validate(user)

"""Auth, profile, and settings request/response schemas."""

from lingvo.schemas.common import CamelModel, UserCard


class RegisterRequest(CamelModel):
    """POST /api/register request body."""

    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(CamelModel):
    """POST /api/auth/login request body."""

    email: str | None = None
    password: str | None = None


class ProfileResponse(UserCard):
    """Public profile of a user."""

    bio: str | None = None


class AccountResponse(ProfileResponse):
    """Profile of the authenticated user, including private settings."""

    language: str


class LoginResponse(CamelModel):
    """POST /api/auth/login response body."""

    access_token: str
    token_type: str = "bearer"
    user: AccountResponse


class ProfileUpdate(CamelModel):
    """PUT /api/profile request body."""

    name: str | None = None
    bio: str | None = None
    avatar: str | None = None


class LanguageSettings(CamelModel):
    """GET/PUT /api/settings body."""

    language: str | None = None

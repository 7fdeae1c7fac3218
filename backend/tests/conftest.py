"""Shared pytest fixtures for the Lingvo test suite.

Provides:
  - mock_translation_provider: TranslationProvider with call tracking
  - engine / session_factory: async SQLite in-memory database
  - api_app / client: the FastAPI app over httpx.ASGITransport with the
    database session and translation provider dependencies overridden
  - alice, bob, carol: persisted users
  - auth_headers: bearer header for a user

The database URL is pointed at SQLite before any lingvo module is
imported so the module-level engine never needs a Postgres driver.
"""

from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

# ---------------------------------------------------------------------------
# Standard test imports (safe now that the environment is set)
# ---------------------------------------------------------------------------

from collections.abc import AsyncIterator, Callable  # noqa: E402
from typing import Any  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import lingvo.models  # noqa: E402,F401
from lingvo.api.deps import get_translation_provider  # noqa: E402
from lingvo.core.security import create_access_token, hash_password  # noqa: E402
from lingvo.db.postgres import Base, get_async_session  # noqa: E402
from lingvo.models.user import User  # noqa: E402
from lingvo.services.translation.base import TranslationProvider  # noqa: E402

TEST_PASSWORD = "password123"


# ---------------------------------------------------------------------------
# Mock translation provider
# ---------------------------------------------------------------------------


class MockTranslationProvider(TranslationProvider):
    """Returns a configurable translation, or raises when ``error`` is set."""

    def __init__(
        self,
        translation: str | None = "Mock translation",
        error: Exception | None = None,
    ) -> None:
        self.translation = translation
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def translate(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
    ) -> str | None:
        self.calls.append(
            {"text": text, "source_lang": source_lang, "target_lang": target_lang}
        )
        if self.error is not None:
            raise self.error
        return self.translation


@pytest.fixture
def mock_translation_provider() -> MockTranslationProvider:
    """Mock translation provider fixture."""
    return MockTranslationProvider()


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Fresh in-memory SQLite database per test.

    StaticPool keeps the single in-memory connection alive across sessions.
    """
    eng = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="session")
def password_hash() -> str:
    """One bcrypt hash shared by every fixture user."""
    return hash_password(TEST_PASSWORD)


@pytest.fixture
def make_user(
    session_factory: async_sessionmaker[AsyncSession],
    password_hash: str,
) -> Callable[..., Any]:
    """Factory that persists a user and returns it detached."""

    async def _make(name: str, email: str, language: str = "ru") -> User:
        async with session_factory() as session:
            user = User(
                name=name,
                email=email,
                password_hash=password_hash,
                language=language,
            )
            session.add(user)
            await session.commit()
            return user

    return _make


@pytest_asyncio.fixture
async def alice(make_user: Callable[..., Any]) -> User:
    return await make_user("Alice", "alice@example.com", language="en")


@pytest_asyncio.fixture
async def bob(make_user: Callable[..., Any]) -> User:
    return await make_user("Bob", "bob@example.com")


@pytest_asyncio.fixture
async def carol(make_user: Callable[..., Any]) -> User:
    return await make_user("Carol", "carol@example.com")


@pytest.fixture
def auth_headers() -> Callable[[User], dict[str, str]]:
    """Bearer header carrying a fresh session token for the user."""

    def _headers(user: User) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}

    return _headers


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------


@pytest.fixture
def api_app(
    session_factory: async_sessionmaker[AsyncSession],
    mock_translation_provider: MockTranslationProvider,
) -> Any:
    """The FastAPI app wired to the test database and mock provider."""
    from lingvo.main import app

    async def _override_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = _override_session
    app.dependency_overrides[get_translation_provider] = lambda: mock_translation_provider
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(api_app: Any) -> AsyncIterator[httpx.AsyncClient]:
    """HTTP client talking to the app in-process."""
    transport = httpx.ASGITransport(app=api_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test/api") as c:
        yield c

"""Database engine, declarative base, and the per-request session.

Production runs on Postgres through asyncpg; tests and quick local runs
point DATABASE_URL at SQLite via aiosqlite.
"""

from collections.abc import AsyncGenerator
from typing import Any

import structlog
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from lingvo.core.config import settings
from lingvo.core.exceptions import DatabaseConnectionError

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    pass


def _engine_options(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        return {}
    return {"pool_size": 20, "max_overflow": 10, "pool_pre_ping": True}


engine: AsyncEngine = create_async_engine(
    settings.database_url, **_engine_options(settings.database_url)
)

async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """One session, one transaction per request.

    The handler's writes are committed together after it returns (both
    edges of a contact pair, an account and everything it owns). Any
    failure rolls the whole request back; driver errors surface as 503.
    """
    session = async_session_factory()
    try:
        yield session
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        logger.error("db_request_failed", error=str(e))
        raise DatabaseConnectionError(f"Database operation failed: {e}") from e
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def close_postgres() -> None:
    """Release pooled connections on shutdown."""
    logger.info("db_engine_disposed")
    await engine.dispose()

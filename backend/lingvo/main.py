"""FastAPI application entrypoint.

All routes prefixed /api. Auto-generated OpenAPI docs at /docs.

A MyMemoryProvider is created once during the lifespan and stored on
app.state.translation_provider for injection via Depends().
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lingvo.api.v1.auth import router as auth_router
from lingvo.api.v1.contacts import router as contacts_router
from lingvo.api.v1.health import router as health_router
from lingvo.api.v1.messages import router as messages_router
from lingvo.api.v1.posts import router as posts_router
from lingvo.api.v1.profile import router as profile_router
from lingvo.api.v1.translate import router as translate_router
from lingvo.core.config import settings
from lingvo.core.exceptions import LingvoError
from lingvo.db.postgres import close_postgres
from lingvo.services.translation.mymemory import MyMemoryProvider


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle.

    Creates the singleton translation provider and attaches it to app.state.
    Retrieved in request handlers via Depends() in lingvo/api/deps.py.
    """
    # --- Startup ---
    logger.info("app_startup", env=settings.app_env)

    app.state.translation_provider = MyMemoryProvider(
        api_url=settings.translation_api_url,
    )

    logger.info("app_providers_ready")
    yield

    # --- Shutdown ---
    logger.info("app_shutdown")

    await app.state.translation_provider.close()
    await close_postgres()


app = FastAPI(
    title="Lingvo API",
    description="Contacts, direct messages with on-demand translation, and a social feed.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS: permissive for development only
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if not settings.is_production else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LingvoError)
async def lingvo_error_handler(request: Request, exc: LingvoError) -> JSONResponse:
    """Structured error response for all Lingvo exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and parameters are plain 400 validation errors."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    return JSONResponse(
        status_code=400,
        content={"error": f"{location}: {message}" if location else message},
    )


# Mount all routers
app.include_router(health_router, prefix="/api")
app.include_router(auth_router, prefix="/api")
app.include_router(profile_router, prefix="/api")
app.include_router(contacts_router, prefix="/api")
app.include_router(messages_router, prefix="/api")
app.include_router(posts_router, prefix="/api")
app.include_router(translate_router, prefix="/api")

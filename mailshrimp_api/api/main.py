from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from mailshrimp_api.api.errors import register_exception_handlers
from mailshrimp_api.api.routes.contacts import router as contacts_router
from mailshrimp_api.api.routes.messages import router as messages_router
from mailshrimp_api.core.logging import configure_logging, correlation_id_var
from mailshrimp_api.core.settings import AppSettings, get_app_settings
from mailshrimp_api.db.run_migrations import main as run_alembic
from mailshrimp_api.schemas.common import MessageResponse

logger = logging.getLogger(__name__)

OPENAPI_TAGS = [
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Contacts", "description": "Account-scoped contacts with soft/hard delete."},
    {"name": "Messages", "description": "Account-scoped messages with soft/hard delete."},
]


async def _migrate() -> None:
    logger.info("Applying migrations (upgrade head)")
    try:
        # env.py drives its own event loop, so keep it off the server's loop.
        await asyncio.to_thread(run_alembic, ["upgrade", "head"])
    except Exception:
        logger.exception("Migrations failed; serving anyway")
    else:
        logger.info("Migrations applied")


def _lifespan(settings: AppSettings):
    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if settings.RUN_MIGRATIONS_ON_STARTUP:
            await _migrate()
        yield

    return lifespan


def _add_cors(app: FastAPI, settings: AppSettings) -> None:
    allow_credentials = settings.CORS_ALLOW_CREDENTIALS
    if allow_credentials and settings.CORS_ORIGINS == ["*"]:
        logger.warning("Credentials cannot be combined with wildcard CORS origins; disabling credentials.")
        allow_credentials = False
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=allow_credentials,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )


async def correlation_middleware(request: Request, call_next):
    """Tag the request with a correlation id and echo it as X-Correlation-ID."""
    cid = (
        request.headers.get("X-Correlation-ID")
        or request.headers.get("X-Request-ID")
        or uuid4().hex
    )
    request.state.correlation_id = cid
    reset_token = correlation_id_var.set(cid)
    try:
        logger.info("Incoming request %s %s", request.method, request.url.path)
        response = await call_next(request)
    finally:
        correlation_id_var.reset(reset_token)
    response.headers["X-Correlation-ID"] = cid
    return response


# PUBLIC_INTERFACE
def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Build the FastAPI application with routers, middleware and error handlers."""
    settings = settings or get_app_settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        openapi_tags=OPENAPI_TAGS,
        lifespan=_lifespan(settings),
    )
    _add_cors(app, settings)
    app.middleware("http")(correlation_middleware)
    register_exception_handlers(app)

    @app.get("/health", response_model=MessageResponse, summary="Health Check", tags=["Health"])
    def health_check() -> MessageResponse:
        """Liveness probe; does not touch the database."""
        return MessageResponse(message="Healthy")

    app.include_router(contacts_router)
    app.include_router(messages_router)
    return app


app = create_app()

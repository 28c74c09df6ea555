"""Newsdesk API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly; unmatched paths and methods reach the
      404/405 handler, never a catch-all route
    - The store handle is passed in (create_app(db_manager=...)) or built by
      the lifespan from settings; never a module-level singleton
    - Global error handlers map every failure to {"message": str}
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from newsdesk.api.error_handlers import register_error_handlers
from newsdesk.api.middleware import answer_head_as_get
from newsdesk.api.routes import (
    articles, comments, endpoints, health, topics, users,
)
from newsdesk.config import Settings, get_settings
from newsdesk.infrastructure.database import DatabaseSessionManager
from newsdesk.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    owns_manager = app.state.db_manager is None
    if owns_manager:
        app.state.db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
            echo=settings.database_echo,
        )
    logger.info("Newsdesk API started")
    yield
    logger.info("Newsdesk API shutting down")
    if owns_manager:
        await app.state.db_manager.close()
        app.state.db_manager = None


def create_app(
    settings: Settings | None = None,
    db_manager: DatabaseSessionManager | None = None,
) -> FastAPI:
    """Build an app instance bound to its own settings and store handle."""
    settings = settings or get_settings()
    app = FastAPI(title=settings.app_title, version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.db_manager = db_manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(answer_head_as_get)

    app.include_router(endpoints.router)
    app.include_router(topics.router)
    app.include_router(users.router)
    app.include_router(articles.router)
    app.include_router(comments.router)
    app.include_router(health.router)

    register_error_handlers(app)
    return app


app = create_app()

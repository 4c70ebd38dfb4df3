"""Notebox API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery — ExMA anti-pattern)
    - Global error handlers map NoteboxError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database handle built on startup via lifespan and stored on app.state;
      routes reach it only through dependencies
    - Demo data seeded at most once (only into an empty categories table)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app(settings) factory: tests and scripts build isolated apps;
      the module-level `app` is the ASGI entry point (uvicorn notebox.main:app)
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from notebox.api.error_handlers import register_error_handlers
from notebox.api.routes import categories, health, notes
from notebox.config import Settings, get_settings
from notebox.infrastructure.database import DatabaseSessionManager
from notebox.infrastructure.observability import setup_logging
from notebox.infrastructure.sql_repositories import (
    SqlCategoryRepository, SqlNoteRepository,
)
from notebox.services.seed_demo_data import seed_demo_data

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        db_manager = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        app.state.db_manager = db_manager
        if settings.database_auto_create:
            await db_manager.create_all()
        if settings.seed_demo_data:
            async with db_manager.session() as db:
                await seed_demo_data(
                    SqlCategoryRepository(db), SqlNoteRepository(db),
                )
        logger.info("Notebox API started")
        yield
        logger.info("Notebox API shutting down")
        await db_manager.close()
        app.state.db_manager = None

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Notebox API", version="1.0.0",
        lifespan=_build_lifespan(settings),
    )

    # CORS origins come from settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(categories.router)
    app.include_router(notes.router)

    register_error_handlers(app)

    # Static files: the web client build, when present
    # ADR: mounted AFTER API routes so /api/* takes precedence
    if os.path.isdir("static"):
        app.mount("/", StaticFiles(directory="static", html=True), name="static")

    return app


app = create_app()

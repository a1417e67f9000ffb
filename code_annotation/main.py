"""Code Annotation API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers render every failure as an error envelope
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py and are registered here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from code_annotation.api.error_handlers import register_error_handlers
from code_annotation.api.routes import (
    assignments, experiments, file_pairs, health, users,
)
from code_annotation.config import get_settings
from code_annotation.infrastructure.database import init_db
from code_annotation.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Code Annotation API {settings.version} started")
    yield
    logger.info("Code Annotation API shutting down")


settings = get_settings()
app = FastAPI(
    title="Code Annotation API", version=settings.version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(experiments.router)
app.include_router(assignments.router)
app.include_router(file_pairs.router)
app.include_router(users.router)

register_error_handlers(app)

"""
Main application module.

This module initializes and configures the FastAPI application.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from music_db import __version__
from music_db.middleware.error_handler import add_error_handlers
from music_db.routes import albums_router, artists_router, genres_router
from music_db.utils.config import get_settings
from music_db.utils.database import close_db, init_db

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application with middleware, error handlers and routers."""
    settings = get_settings()

    app = FastAPI(
        title="MusicDB API",
        description="API for browsing and editing a music catalog",
        version=__version__
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_error_handlers(app)

    app.include_router(artists_router)
    app.include_router(albums_router)
    app.include_router(genres_router)

    @app.on_event("startup")
    def startup_event():
        """Initialize services on application startup."""
        logger.info("Starting up application...")
        if settings.AUTO_CREATE_TABLES:
            init_db()
        logger.info("Application startup complete")

    @app.on_event("shutdown")
    def shutdown_event():
        """Clean up services on application shutdown."""
        logger.info("Shutting down application...")
        close_db()
        logger.info("Application shutdown complete")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()

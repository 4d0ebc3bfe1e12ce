"""
Database configuration and session management for MusicDB.

This module provides:
- Database URL selection per environment
- Engine creation with per-backend pooling
- The session factory and the FastAPI session dependency
- Table creation for development setups

SQLite is used for development and tests; PostgreSQL (through psycopg2)
for production.
"""

import logging
from typing import Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

from music_db.models import Base
from music_db.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_SQLITE_URL = "sqlite:///music_db.db"


def get_database_url(settings: Optional[Settings] = None) -> str:
    """
    Get database URL based on environment.

    Returns:
        str: Database connection URL
    """
    settings = settings or get_settings()

    if settings.TESTING:
        logger.info("Using in-memory SQLite database for testing")
        return "sqlite://"

    env = settings.ENVIRONMENT.lower()
    if env == "development":
        if settings.DATABASE_URL_DEV:
            return settings.DATABASE_URL_DEV.strip()
        logger.info("Using default SQLite database for development")
        return DEFAULT_SQLITE_URL

    if settings.DATABASE_URL:
        return settings.DATABASE_URL.strip()

    logger.warning("No DATABASE_URL found, falling back to SQLite for production")
    return DEFAULT_SQLITE_URL


def get_engine(database_url: Optional[str] = None, settings: Optional[Settings] = None) -> Engine:
    """
    Get SQLAlchemy engine configured for the target database.

    Args:
        database_url: Database URL. If None, determined from settings.

    Returns:
        Engine: Configured SQLAlchemy engine
    """
    settings = settings or get_settings()
    if database_url is None:
        database_url = get_database_url(settings)

    connect_args = {}
    engine_args = {"echo": settings.DEBUG}

    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, or every session sees an empty database
            engine_args["poolclass"] = StaticPool
    elif database_url.startswith("postgresql"):
        engine_args.update({
            "poolclass": QueuePool,
            "pool_size": settings.POOL_SIZE,
            "max_overflow": settings.MAX_OVERFLOW,
            "pool_timeout": settings.POOL_TIMEOUT,
            "pool_recycle": settings.POOL_RECYCLE,
            "pool_pre_ping": True
        })
        logger.info(
            f"Using QueuePool for PostgreSQL database "
            f"(size={settings.POOL_SIZE}, max_overflow={settings.MAX_OVERFLOW})"
        )

    return create_engine(database_url, connect_args=connect_args, **engine_args)


def get_session_local(engine: Engine) -> sessionmaker:
    return sessionmaker(
        bind=engine,
        autoflush=False,
        expire_on_commit=False
    )


# Create default engine and session factory
engine = get_engine()
SessionLocal = get_session_local(engine)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Create any missing tables.

    Production databases are managed with Alembic migrations instead.
    """
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ready")


def close_db() -> None:
    engine.dispose()
    logger.info("Closed database connection")

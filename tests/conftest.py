"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures and configuration for all tests.
"""

import os

# Settings are cached on first use, so the flag must be set before any import
os.environ["TESTING"] = "true"

from datetime import date

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from music_db.main import create_app
from music_db.models import Album, Artist, Base, Genre, Track
from music_db.services.music_service import MusicService
from music_db.utils.config import get_settings
from music_db.utils.database import get_db


@pytest.fixture
def engine():
    """Create a fresh in-memory database with every table."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db_session(session_factory):
    """Create a test database session."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def music_service(db_session) -> MusicService:
    return MusicService(db_session)


@pytest.fixture
def catalog(db_session):
    """
    Seed two artists with two albums each, tracks for one album and two genres.

    Returns:
        dict: The seeded records keyed by a short name
    """
    jazz = Genre(name="jazz", wiki_tag="Jazz")
    live = Genre(name="live", wiki_tag="Concert")

    miles = Artist(name="Miles Davis", birth_date=date(1926, 5, 26), death_date=date(1991, 9, 28))
    bill = Artist(name="Bill Evans", birth_date=date(1929, 8, 16), death_date=date(1980, 9, 15))

    kind_of_blue = Album(
        title="Kind Of Blue",
        artist=miles,
        genres=[jazz],
        tracks=[
            Track(title="So What", index=1, duration=544),
            Track(title="Freddie Freeloader", index=2, duration=574),
            Track(title="Blue In Green", index=3, duration=327),
            Track(title="All Blues", index=4, duration=693),
            Track(title="Flamenco Sketches", index=5, duration=556),
        ]
    )
    plugged_nickel = Album(title="Cookin' At The Plugged Nickel", artist=miles, genres=[jazz, live])
    spring = Album(title="You Must Believe In Spring", artist=bill, genres=[jazz])
    portrait = Album(title="Portrait In Jazz", artist=bill, genres=[jazz])

    db_session.add_all([jazz, live, miles, bill, kind_of_blue, plugged_nickel, spring, portrait])
    db_session.commit()

    return {
        "jazz": jazz,
        "live": live,
        "miles": miles,
        "bill": bill,
        "kind_of_blue": kind_of_blue,
        "plugged_nickel": plugged_nickel,
        "spring": spring,
        "portrait": portrait,
    }


@pytest.fixture
def test_app() -> FastAPI:
    """Create a new test application instance."""
    return create_app()


def override_get_db(session_factory):
    """Create a callable dependency override for get_db."""
    def _get_test_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()
    return _get_test_db


@pytest.fixture
def client(test_app, session_factory) -> TestClient:
    """Create a test client backed by the in-memory database."""
    test_app.dependency_overrides[get_db] = override_get_db(session_factory)
    yield TestClient(test_app)
    test_app.dependency_overrides.clear()


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear the settings cache around a test that changes the environment."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()

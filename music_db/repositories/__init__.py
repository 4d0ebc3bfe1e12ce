"""
This package contains repository implementations for database operations.

Repositories provide a clean abstraction layer for database access,
implementing the repository pattern to separate business logic from
data access concerns.
"""

from music_db.repositories.base import BaseRepository
from music_db.repositories.artist import ArtistRepository
from music_db.repositories.album import AlbumRepository
from music_db.repositories.track import TrackRepository
from music_db.repositories.genre import GenreRepository

__all__ = [
    'BaseRepository',
    'ArtistRepository',
    'AlbumRepository',
    'TrackRepository',
    'GenreRepository'
]

"""
This package contains the database models for the application.
"""

from music_db.models.base import Base
from music_db.models.artist import Artist
from music_db.models.album import Album, albums_genres
from music_db.models.track import Track
from music_db.models.genre import Genre

__all__ = ['Base', 'Artist', 'Album', 'albums_genres', 'Track', 'Genre']

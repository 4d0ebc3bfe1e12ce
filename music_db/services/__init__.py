"""
This package contains the service layer sitting between routes and repositories.
"""

from music_db.services.music_service import MusicService

__all__ = ['MusicService']

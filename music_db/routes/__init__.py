"""
HTTP routers for the catalog API.
"""

from music_db.routes.albums import router as albums_router
from music_db.routes.artists import router as artists_router
from music_db.routes.genres import router as genres_router

__all__ = ['albums_router', 'artists_router', 'genres_router']

"""
This package contains Pydantic models for changeset params and API responses.
"""

from music_db.schemas.artist import ArtistParams, ArtistResponse
from music_db.schemas.album import (
    AlbumParams,
    LongTitleAlbumParams,
    AlbumResponse,
    AlbumDetailResponse
)
from music_db.schemas.track import TrackParams, TrackResponse
from music_db.schemas.genre import GenreParams, GenreResponse

__all__ = [
    'ArtistParams',
    'ArtistResponse',
    'AlbumParams',
    'LongTitleAlbumParams',
    'AlbumResponse',
    'AlbumDetailResponse',
    'TrackParams',
    'TrackResponse',
    'GenreParams',
    'GenreResponse'
]

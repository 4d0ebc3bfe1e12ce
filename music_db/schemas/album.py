"""
Pydantic models for albums.

AlbumParams is what the regular album changeset casts and validates.
LongTitleAlbumParams composes one more rule on top of it: the title must be
at least 100 characters long.

Params schemas strip surrounding whitespace from strings, so the stored title
is the trimmed one: "  Blue Train  " is saved as "Blue Train".
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from music_db.schemas.artist import ArtistResponse
from music_db.schemas.genre import GenreResponse
from music_db.schemas.track import TrackResponse


class AlbumParams(BaseModel):
    """Fields an album changeset may cast"""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(min_length=1)


class LongTitleAlbumParams(AlbumParams):
    """Album params with a (deliberately unrealistic) minimum title length"""

    title: str = Field(min_length=100)


class AlbumResponse(BaseModel):
    """Model for album response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    artist_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AlbumDetailResponse(AlbumResponse):
    """Album response with its preloaded associations"""

    artist: Optional[ArtistResponse] = None
    tracks: List[TrackResponse] = []
    genres: List[GenreResponse] = []

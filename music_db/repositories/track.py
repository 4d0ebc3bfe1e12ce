"""
Repository for Track model operations.
"""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from music_db.models.album import Album
from music_db.models.track import Track
from music_db.repositories.base import BaseRepository


class TrackRepository(BaseRepository[Track]):
    """Repository for Track database operations."""

    def __init__(self, db: Session):
        super().__init__(db, Track)

    def next_index(self, album: Album) -> int:
        """Position a track appended to the album would take."""
        stmt = select(func.max(self.model.index)).where(self.model.album_id == album.id)
        return (self.db.scalar(stmt) or 0) + 1

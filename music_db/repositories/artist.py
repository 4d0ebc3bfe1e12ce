"""
Repository for Artist model operations.
"""

from typing import Optional
from sqlalchemy.orm import Session

from music_db.models.artist import Artist
from music_db.repositories.base import BaseRepository


class ArtistRepository(BaseRepository[Artist]):
    """Repository for Artist database operations."""

    def __init__(self, db: Session):
        super().__init__(db, Artist)

    def get_by_name(self, name: str) -> Optional[Artist]:
        """
        Get an artist by exact name.

        Args:
            name (str): Artist name

        Returns:
            Optional[Artist]: Artist if found, None otherwise
        """
        return self.get_by(name=name)

"""
Repository for Album model operations.

Besides the generic CRUD helpers this exposes the two queries the catalog is
built around: the albums belonging to an artist, and a fuzzy title search.
"""

from typing import List, Optional, Sequence
from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload, with_parent

from music_db.models.album import Album
from music_db.models.artist import Artist
from music_db.repositories.base import BaseRepository

PRELOADABLE = ("artist", "tracks", "genres")


class AlbumRepository(BaseRepository[Album]):
    """Repository for Album database operations."""

    def __init__(self, db: Session):
        super().__init__(db, Album)

    def get_by_id_with(self, album_id: int, preload: Sequence[str] = ()) -> Optional[Album]:
        """
        Get an album by ID, loading the named associations up front.

        Each association is fetched with its own follow-up SELECT ... IN
        query rather than a join.

        Args:
            album_id (int): Album primary key
            preload (Sequence[str]): Any of "artist", "tracks", "genres"

        Returns:
            Optional[Album]: Album if found, None otherwise

        Raises:
            ValueError: If an unknown association name is requested
        """
        unknown = [name for name in preload if name not in PRELOADABLE]
        if unknown:
            raise ValueError(f"Cannot preload {', '.join(unknown)} on Album")

        stmt = select(self.model).where(self.model.id == album_id)
        for name in preload:
            stmt = stmt.options(selectinload(getattr(self.model, name)))
        return self.db.scalars(stmt).first()

    def get_by_artist(self, artist: Artist) -> List[Album]:
        """
        Get every album that belongs to an artist.

        Args:
            artist (Artist): Parent artist

        Returns:
            List[Album]: The artist's albums ordered by title; empty for an
            artist that has not been saved yet
        """
        if artist.id is None:
            return []
        stmt = (
            select(self.model)
            .where(with_parent(artist, Artist.albums))
            .order_by(self.model.title)
        )
        return list(self.db.scalars(stmt).all())

    def search(self, query: str, skip: int = 0, limit: int = 100) -> List[Album]:
        """
        Find albums whose title contains the query, ignoring case.

        Args:
            query (str): Text to look for in the title
            skip (int): Number of records to skip
            limit (int): Maximum number of records to return

        Returns:
            List[Album]: Matching albums ordered by title
        """
        stmt = Album.search(query).order_by(self.model.title, self.model.id).offset(skip).limit(limit)
        return list(self.db.scalars(stmt).all())

"""
Repository for Genre model operations.
"""

from typing import Iterable, List
from sqlalchemy import select
from sqlalchemy.orm import Session

from music_db.models.genre import Genre
from music_db.repositories.base import BaseRepository


class GenreRepository(BaseRepository[Genre]):
    """Repository for Genre database operations."""

    def __init__(self, db: Session):
        super().__init__(db, Genre)

    def get_by_names(self, names: Iterable[str]) -> List[Genre]:
        """
        Get the genres with the given names.

        Names with no matching genre are simply absent from the result.

        Args:
            names (Iterable[str]): Genre names

        Returns:
            List[Genre]: Matching genres ordered by name
        """
        names = list(names)
        if not names:
            return []
        stmt = select(self.model).where(self.model.name.in_(names)).order_by(self.model.name)
        return list(self.db.scalars(stmt).all())

from sqlalchemy import Column, ForeignKey, Integer, String, Table, select
from sqlalchemy.orm import relationship
from sqlalchemy.sql import Select

from music_db.models.base import Base, TimestampMixin

# Join table only, no model class of its own
albums_genres = Table(
    "albums_genres",
    Base.metadata,
    Column("album_id", Integer, ForeignKey("albums.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", Integer, ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)


class Album(TimestampMixin, Base):
    """
    Model for albums in the catalog.

    Attributes:
        id (int): Primary key
        title (str): Album title, required
        artist_id (int): Foreign key to the artists table
        created_at (datetime): Record creation timestamp
        updated_at (datetime): Record last update timestamp

    Relationships:
        artist: Many-to-one relationship with Artist
        tracks: One-to-many relationship with Track, ordered by track index
        genres: Many-to-many relationship with Genre through albums_genres
    """
    __tablename__ = "albums"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    artist_id = Column(Integer, ForeignKey("artists.id"), index=True)

    artist = relationship("Artist", back_populates="albums")
    tracks = relationship(
        "Track",
        back_populates="album",
        order_by="Track.index",
        cascade="all, delete-orphan",
    )
    genres = relationship("Genre", secondary=albums_genres, back_populates="albums")

    @classmethod
    def search(cls, term: str) -> Select:
        """
        Build a case-insensitive substring match on the album title.

        The term goes into the LIKE pattern unescaped, so ``%`` and ``_``
        keep their wildcard meaning.

        Args:
            term (str): Text to look for anywhere in the title

        Returns:
            Select: Statement selecting the matching albums
        """
        return select(cls).where(cls.title.ilike(f"%{term}%"))

    def __repr__(self):
        return f"<Album {self.title}>"

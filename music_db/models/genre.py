from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from music_db.models.base import Base, TimestampMixin
from music_db.models.album import albums_genres


class Genre(TimestampMixin, Base):
    """
    Model for genres albums can be tagged with.

    The name column carries a unique index; inserting a duplicate name fails
    at the database with an integrity error.
    """
    __tablename__ = "genres"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    wiki_tag = Column(String)

    albums = relationship("Album", secondary=albums_genres, back_populates="genres")

    def __repr__(self):
        return f"<Genre {self.name}>"

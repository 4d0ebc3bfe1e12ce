from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from music_db.models.base import Base, TimestampMixin


class Track(TimestampMixin, Base):
    """
    Model for the tracks of an album.

    Attributes:
        id (int): Primary key
        title (str): Track title, required
        duration (int): Length in seconds
        index (int): Position on the album, starting at 1
        number_of_plays (int): Play counter
        album_id (int): Foreign key to the albums table
    """
    __tablename__ = "tracks"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    duration = Column(Integer)
    index = Column(Integer, nullable=False)
    number_of_plays = Column(Integer, nullable=False, default=0, server_default="0")
    album_id = Column(Integer, ForeignKey("albums.id", ondelete="CASCADE"), nullable=False, index=True)

    album = relationship("Album", back_populates="tracks")

    def __repr__(self):
        return f"<Track {self.index}. {self.title}>"

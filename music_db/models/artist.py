from sqlalchemy import Column, Date, Integer, String
from sqlalchemy.orm import relationship

from music_db.models.base import Base, TimestampMixin


class Artist(TimestampMixin, Base):
    """
    Model for recording artists.

    Attributes:
        id (int): Primary key
        name (str): Artist name, used as the natural lookup key
        birth_date (date): Optional date of birth
        death_date (date): Optional date of death
        created_at (datetime): Record creation timestamp
        updated_at (datetime): Record last update timestamp

    Relationships:
        albums: One-to-many relationship with Album
    """
    __tablename__ = "artists"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, index=True)
    birth_date = Column(Date)
    death_date = Column(Date)

    albums = relationship("Album", back_populates="artist", order_by="Album.title")

    def __repr__(self):
        return f"<Artist {self.name}>"

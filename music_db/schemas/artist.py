"""
Pydantic models for artists.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ArtistParams(BaseModel):
    """Fields an artist changeset may cast"""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(min_length=1)
    birth_date: Optional[date] = None
    death_date: Optional[date] = None


class ArtistResponse(BaseModel):
    """Model for artist response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    birth_date: Optional[date] = None
    death_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

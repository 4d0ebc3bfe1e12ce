"""
Pydantic models for tracks.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TrackParams(BaseModel):
    """Fields a track changeset may cast"""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    title: str = Field(min_length=1)
    index: int = Field(ge=1)
    duration: Optional[int] = Field(default=None, gt=0)
    number_of_plays: int = Field(default=0, ge=0)


class TrackResponse(BaseModel):
    """Model for track response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    index: int
    duration: Optional[int] = None
    number_of_plays: int = 0
    album_id: int
    created_at: Optional[datetime] = None

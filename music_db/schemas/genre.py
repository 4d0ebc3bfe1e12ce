"""
Pydantic models for genres.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class GenreParams(BaseModel):
    """Fields a genre changeset may cast"""
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    name: str = Field(min_length=1)
    wiki_tag: Optional[str] = None


class GenreResponse(BaseModel):
    """Model for genre response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    wiki_tag: Optional[str] = None
    created_at: Optional[datetime] = None

"""
Shared FastAPI dependencies for the catalog routers.
"""

from typing import Optional
from fastapi import Depends
from sqlalchemy.orm import Session

from music_db.services.music_service import MusicService
from music_db.utils.config import get_settings
from music_db.utils.database import get_db


def get_music_service(db: Session = Depends(get_db)) -> MusicService:
    """Get a MusicService bound to the request's session."""
    return MusicService(db)


def page_size(limit: Optional[int]) -> int:
    return limit or get_settings().DEFAULT_PAGE_SIZE

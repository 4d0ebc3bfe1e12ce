"""
Router for genre endpoints.
"""

from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from music_db.routes.deps import get_music_service, page_size
from music_db.schemas import GenreResponse
from music_db.services.music_service import MusicService
from music_db.utils.api_response import success_response

router = APIRouter(
    prefix="/api/genres",
    tags=["genres"]
)


@router.get("/")
def list_genres(
    skip: int = Query(0, ge=0),
    limit: Optional[int] = Query(None, ge=1),
    service: MusicService = Depends(get_music_service)
):
    genres = service.list_genres(skip, page_size(limit))
    return success_response(
        data={
            "genres": [GenreResponse.model_validate(g).model_dump(mode="json") for g in genres],
            "count": len(genres)
        }
    )


@router.post("/")
def create_genre(
    params: Dict[str, Any] = Body(...),
    service: MusicService = Depends(get_music_service)
):
    """Create a genre; names are unique"""
    genre = service.create_genre(params)
    return JSONResponse(
        content=success_response(
            data=GenreResponse.model_validate(genre).model_dump(mode="json"),
            message="Genre created successfully"
        ),
        status_code=status.HTTP_201_CREATED
    )

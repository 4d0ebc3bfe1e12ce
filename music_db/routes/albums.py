"""
Router for album endpoints.

This module handles API routes for:
- Searching and listing albums
- Reading one album with its artist, tracks and genres
- Creating, updating and deleting albums
- Adding tracks and setting genres
"""

from typing import Any, Dict, List, Optional
from fastapi import APIRouter, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from music_db.routes.deps import get_music_service, page_size
from music_db.schemas import AlbumDetailResponse, AlbumResponse, TrackResponse
from music_db.services.music_service import MusicService
from music_db.utils.api_response import success_response

router = APIRouter(
    prefix="/api/albums",
    tags=["albums"]
)

DETAIL_PRELOAD = ("artist", "tracks", "genres")


def _detail(service: MusicService, album_id: int) -> Dict[str, Any]:
    album = service.get_album(album_id, preload=DETAIL_PRELOAD)
    return AlbumDetailResponse.model_validate(album).model_dump(mode="json")


@router.get("/")
def list_albums(
    search: Optional[str] = Query(None, description="Case-insensitive text to find in album titles"),
    skip: int = Query(0, ge=0, description="Number of records to skip"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of records to return"),
    service: MusicService = Depends(get_music_service)
):
    """List albums, or search them by title"""
    limit = page_size(limit)
    if search is not None:
        albums = service.search_albums(search, skip, limit)
    else:
        albums = service.list_albums(skip, limit)

    return success_response(
        data={
            "albums": [AlbumResponse.model_validate(a).model_dump(mode="json") for a in albums],
            "count": len(albums),
            "skip": skip,
            "limit": limit
        }
    )


@router.get("/{album_id}")
def get_album(album_id: int, service: MusicService = Depends(get_music_service)):
    """Get an album with its artist, tracks and genres"""
    return success_response(data=_detail(service, album_id))


@router.post("/")
def create_album(
    params: Dict[str, Any] = Body(...),
    long_title: bool = Query(False, description="Also require a title of at least 100 characters"),
    service: MusicService = Depends(get_music_service)
):
    """Create an album"""
    album = service.create_album(params, long_title=long_title)
    return JSONResponse(
        content=success_response(
            data=AlbumResponse.model_validate(album).model_dump(mode="json"),
            message="Album created successfully"
        ),
        status_code=status.HTTP_201_CREATED
    )


@router.patch("/{album_id}")
def update_album(
    album_id: int,
    params: Dict[str, Any] = Body(...),
    long_title: bool = Query(False, description="Also require a title of at least 100 characters"),
    service: MusicService = Depends(get_music_service)
):
    """Update an album"""
    album = service.get_album(album_id)
    album = service.update_album(album, params, long_title=long_title)
    return success_response(
        data=AlbumResponse.model_validate(album).model_dump(mode="json"),
        message="Album updated successfully"
    )


@router.delete("/{album_id}")
def delete_album(album_id: int, service: MusicService = Depends(get_music_service)):
    """Delete an album and its tracks"""
    album = service.get_album(album_id)
    service.delete_album(album)
    return success_response(data={"id": album_id}, message="Album deleted successfully")


@router.post("/{album_id}/tracks")
def add_track(
    album_id: int,
    params: Dict[str, Any] = Body(...),
    service: MusicService = Depends(get_music_service)
):
    """Append a track to an album"""
    album = service.get_album(album_id)
    track = service.add_track(album, params)
    return JSONResponse(
        content=success_response(
            data=TrackResponse.model_validate(track).model_dump(mode="json"),
            message="Track added successfully"
        ),
        status_code=status.HTTP_201_CREATED
    )


@router.put("/{album_id}/genres")
def set_album_genres(
    album_id: int,
    genres: List[str] = Body(..., embed=True),
    service: MusicService = Depends(get_music_service)
):
    """Replace the genres of an album"""
    album = service.get_album(album_id, preload=("genres",))
    service.tag_album(album, genres)
    return success_response(data=_detail(service, album_id), message="Genres updated successfully")

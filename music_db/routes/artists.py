"""
Router for artist endpoints.

This module handles API routes for:
- Looking up an artist by name
- Listing an artist's albums
- Creating artists, optionally together with their albums
"""

from typing import Any, Dict
from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from music_db.routes.deps import get_music_service
from music_db.schemas import AlbumResponse, ArtistResponse
from music_db.services.music_service import MusicService
from music_db.utils.api_response import success_response

router = APIRouter(
    prefix="/api/artists",
    tags=["artists"]
)


@router.post("/")
def create_artist(
    params: Dict[str, Any] = Body(...),
    service: MusicService = Depends(get_music_service)
):
    """Create an artist; an ``albums`` list is created in the same transaction"""
    albums_params = params.get("albums")
    if albums_params is not None and (
        not isinstance(albums_params, list)
        or not all(isinstance(item, dict) for item in albums_params)
    ):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="albums must be a list of objects"
        )

    if albums_params:
        artist = service.create_artist_with_albums(params, albums_params)
    else:
        artist = service.create_artist(params)

    albums = service.all_albums_by_artist(artist)
    data = ArtistResponse.model_validate(artist).model_dump(mode="json")
    data["albums"] = [AlbumResponse.model_validate(a).model_dump(mode="json") for a in albums]

    return JSONResponse(
        content=success_response(data=data, message="Artist created successfully"),
        status_code=status.HTTP_201_CREATED
    )


@router.get("/{name}")
def get_artist(name: str, service: MusicService = Depends(get_music_service)):
    """Get an artist by name"""
    artist = service.require_artist(name)
    return success_response(data=ArtistResponse.model_validate(artist).model_dump(mode="json"))


@router.get("/{name}/albums")
def list_artist_albums(name: str, service: MusicService = Depends(get_music_service)):
    """List every album of an artist"""
    artist = service.require_artist(name)
    albums = service.all_albums_by_artist(artist)
    return success_response(
        data={
            "albums": [AlbumResponse.model_validate(a).model_dump(mode="json") for a in albums],
            "count": len(albums)
        }
    )


@router.post("/{name}/albums")
def create_artist_album(
    name: str,
    params: Dict[str, Any] = Body(...),
    service: MusicService = Depends(get_music_service)
):
    """Create an album under an existing artist"""
    artist = service.require_artist(name)
    album = service.create_album(params, artist=artist)
    return JSONResponse(
        content=success_response(
            data=AlbumResponse.model_validate(album).model_dump(mode="json"),
            message="Album created successfully"
        ),
        status_code=status.HTTP_201_CREATED
    )

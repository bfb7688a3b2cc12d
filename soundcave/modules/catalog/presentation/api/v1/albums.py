# 📄 File: soundcave/modules/catalog/presentation/api/v1/albums.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for browsing album releases, and for artists' managers to publish, edit
# and remove them.
#
# 🧪 Purpose (Technical Summary):
# FastAPI album CRUD endpoints. Reads are public; writes require admin, or an
# independent or label account managing the album's artist.
#
# 🔗 Dependencies:
# - FastAPI router, soundcave.shared.core.dependencies (role gates, pagination)
# - soundcave.modules.catalog.domain.services.album_service
#
# 🔄 Connected Modules / Calls From:
# - soundcave.api.v1.router (router inclusion)

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status

from soundcave.shared.core.dependencies import PaginationParams, get_pagination_params
from soundcave.shared.core.security import Identity
from soundcave.shared.utils.responses import MessageResponse

from ...dependencies import get_album_service, require_music_editor
from ....domain.models.album import AlbumType
from ....domain.services.album_service import AlbumService
from ..schemas.album_schemas import (
    AlbumCreateRequest,
    AlbumDataResponse,
    AlbumListResponse,
    AlbumResponse,
    AlbumUpdateRequest,
)

albums_router = APIRouter(prefix="/albums", tags=["Albums"])

WRITE_RESPONSES = {
    401: {"description": "Not authenticated"},
    403: {"description": "Admin, independent or label role required, or the artist is managed by another account"},
}


@albums_router.post(
    "",
    response_model=AlbumDataResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create album",
    responses={404: {"description": "Artist not found"}, **WRITE_RESPONSES},
)
async def create_album(
    payload: AlbumCreateRequest,
    editor: Identity = Depends(require_music_editor),
    album_service: AlbumService = Depends(get_album_service),
) -> AlbumDataResponse:
    album = await album_service.create_album(editor, payload.model_dump())
    return AlbumDataResponse(message="Album created successfully", data=AlbumResponse.from_domain(album))


@albums_router.get(
    "",
    response_model=AlbumListResponse,
    summary="List albums",
)
async def list_albums(
    artist_id: Optional[int] = Query(None, ge=1),
    album_type: Optional[AlbumType] = Query(None),
    genre: Optional[str] = Query(None, max_length=100),
    search: Optional[str] = Query(None, max_length=100, description="Search title or artist"),
    pagination: PaginationParams = Depends(get_pagination_params),
    album_service: AlbumService = Depends(get_album_service),
) -> AlbumListResponse:
    albums, total = await album_service.list_albums(
        offset=pagination.offset,
        limit=pagination.limit,
        artist_id=artist_id,
        album_type=album_type,
        genre=genre,
        search=search,
    )
    return AlbumListResponse(
        data=[AlbumResponse.from_domain(album) for album in albums],
        pagination=pagination.meta(total),
    )


@albums_router.get(
    "/{album_id}",
    response_model=AlbumDataResponse,
    summary="Get album",
    responses={404: {"description": "Album not found"}},
)
async def get_album(
    album_id: int = Path(..., ge=1),
    album_service: AlbumService = Depends(get_album_service),
) -> AlbumDataResponse:
    return AlbumDataResponse(data=AlbumResponse.from_domain(await album_service.get_album(album_id)))


@albums_router.put(
    "/{album_id}",
    response_model=AlbumDataResponse,
    summary="Update album",
    responses={404: {"description": "Album or artist not found"}, **WRITE_RESPONSES},
)
async def update_album(
    payload: AlbumUpdateRequest,
    album_id: int = Path(..., ge=1),
    editor: Identity = Depends(require_music_editor),
    album_service: AlbumService = Depends(get_album_service),
) -> AlbumDataResponse:
    album = await album_service.update_album(editor, album_id, payload.model_dump(exclude_unset=True))
    return AlbumDataResponse(message="Album updated successfully", data=AlbumResponse.from_domain(album))


@albums_router.delete(
    "/{album_id}",
    response_model=MessageResponse,
    summary="Delete album",
    responses={404: {"description": "Album not found"}, **WRITE_RESPONSES},
)
async def delete_album(
    album_id: int = Path(..., ge=1),
    editor: Identity = Depends(require_music_editor),
    album_service: AlbumService = Depends(get_album_service),
) -> MessageResponse:
    await album_service.delete_album(editor, album_id)
    return MessageResponse(message="Album deleted successfully")

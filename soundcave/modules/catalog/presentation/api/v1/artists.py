# 📄 File: soundcave/modules/catalog/presentation/api/v1/artists.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for browsing artist pages, and for admins and labels to create, edit
# and remove them.
#
# 🧪 Purpose (Technical Summary):
# FastAPI artist CRUD endpoints. Reads are public; writes require admin, or a label
# managing the artist page.
#
# 🔗 Dependencies:
# - FastAPI router, soundcave.shared.core.dependencies (role gates, pagination)
# - soundcave.modules.catalog.domain.services.artist_service
#
# 🔄 Connected Modules / Calls From:
# - soundcave.api.v1.router (router inclusion)

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status

from soundcave.shared.core.dependencies import PaginationParams, get_pagination_params
from soundcave.shared.core.security import Identity
from soundcave.shared.utils.responses import MessageResponse

from ...dependencies import get_artist_service, require_artist_editor
from ....domain.services.artist_service import ArtistService
from ..schemas.artist_schemas import (
    ArtistCreateRequest,
    ArtistDataResponse,
    ArtistListResponse,
    ArtistResponse,
    ArtistUpdateRequest,
)

artists_router = APIRouter(prefix="/artists", tags=["Artists"])

WRITE_RESPONSES = {
    401: {"description": "Not authenticated"},
    403: {"description": "Admin or label role required, or the artist is managed by another account"},
}


@artists_router.post(
    "",
    response_model=ArtistDataResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create artist",
    responses={
        201: {"description": "Artist created"},
        404: {"description": "Manager account not found"},
        409: {"description": "Email already registered"},
        **WRITE_RESPONSES,
    }
)
async def create_artist(
    payload: ArtistCreateRequest,
    editor: Identity = Depends(require_artist_editor),
    artist_service: ArtistService = Depends(get_artist_service),
) -> ArtistDataResponse:
    artist, followers = await artist_service.create_artist(editor, payload.model_dump())
    return ArtistDataResponse(
        message="Artist created successfully",
        data=ArtistResponse.from_domain(artist, followers),
    )


@artists_router.get(
    "",
    response_model=ArtistListResponse,
    summary="List artists",
)
async def list_artists(
    genre: Optional[str] = Query(None, max_length=100),
    country: Optional[str] = Query(None, max_length=100),
    search: Optional[str] = Query(None, max_length=100, description="Search name or email"),
    pagination: PaginationParams = Depends(get_pagination_params),
    artist_service: ArtistService = Depends(get_artist_service),
) -> ArtistListResponse:
    rows, total = await artist_service.list_artists(
        offset=pagination.offset,
        limit=pagination.limit,
        genre=genre,
        country=country,
        search=search,
    )
    return ArtistListResponse(
        data=[ArtistResponse.from_domain(artist, followers) for artist, followers in rows],
        pagination=pagination.meta(total),
    )


@artists_router.get(
    "/{artist_id}",
    response_model=ArtistDataResponse,
    summary="Get artist",
    responses={404: {"description": "Artist not found"}},
)
async def get_artist(
    artist_id: int = Path(..., ge=1),
    artist_service: ArtistService = Depends(get_artist_service),
) -> ArtistDataResponse:
    artist, followers = await artist_service.get_artist(artist_id)
    return ArtistDataResponse(data=ArtistResponse.from_domain(artist, followers))


@artists_router.put(
    "/{artist_id}",
    response_model=ArtistDataResponse,
    summary="Update artist",
    responses={
        404: {"description": "Artist or manager account not found"},
        409: {"description": "Email already registered"},
        **WRITE_RESPONSES,
    }
)
async def update_artist(
    payload: ArtistUpdateRequest,
    artist_id: int = Path(..., ge=1),
    editor: Identity = Depends(require_artist_editor),
    artist_service: ArtistService = Depends(get_artist_service),
) -> ArtistDataResponse:
    artist, followers = await artist_service.update_artist(editor, artist_id, payload.model_dump(exclude_unset=True))
    return ArtistDataResponse(
        message="Artist updated successfully",
        data=ArtistResponse.from_domain(artist, followers),
    )


@artists_router.delete(
    "/{artist_id}",
    response_model=MessageResponse,
    summary="Delete artist",
    responses={404: {"description": "Artist not found"}, **WRITE_RESPONSES},
)
async def delete_artist(
    artist_id: int = Path(..., ge=1),
    editor: Identity = Depends(require_artist_editor),
    artist_service: ArtistService = Depends(get_artist_service),
) -> MessageResponse:
    await artist_service.delete_artist(editor, artist_id)
    return MessageResponse(message="Artist deleted successfully")

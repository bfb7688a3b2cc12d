# 📄 File: soundcave/modules/playlists/presentation/api/v1/playlists.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for making playlists, browsing your own and other people's public
# playlists, and adding, reordering or removing songs.
#
# 🧪 Purpose (Technical Summary):
# FastAPI playlist and playlist song endpoints. Every endpoint requires a credential;
# ownership and visibility are enforced by PlaylistService.
#
# 🔗 Dependencies:
# - FastAPI router, soundcave.shared.core.dependencies (identity, pagination)
# - soundcave.modules.playlists.domain.services.playlist_service
#
# 🔄 Connected Modules / Calls From:
# - soundcave.api.v1.router (router inclusion)

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status

from soundcave.shared.core.dependencies import (
    PaginationParams,
    get_current_identity,
    get_pagination_params,
)
from soundcave.shared.core.security import Identity
from soundcave.shared.utils.responses import MessageResponse

from ...dependencies import get_playlist_service
from ....domain.services.playlist_service import PlaylistService
from ..schemas.playlist_schemas import (
    PlaylistCreateRequest,
    PlaylistDataResponse,
    PlaylistListResponse,
    PlaylistResponse,
    PlaylistSongAddRequest,
    PlaylistSongDataResponse,
    PlaylistSongListResponse,
    PlaylistSongMoveRequest,
    PlaylistSongResponse,
    PlaylistUpdateRequest,
)

playlists_router = APIRouter(prefix="/playlists", tags=["Playlists"])

OWNER_RESPONSES = {
    401: {"description": "Not authenticated"},
    403: {"description": "Playlist belongs to another account"},
    404: {"description": "Playlist not found"},
}


@playlists_router.post(
    "",
    response_model=PlaylistDataResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create playlist",
    responses={401: {"description": "Not authenticated"}},
)
async def create_playlist(
    payload: PlaylistCreateRequest,
    identity: Identity = Depends(get_current_identity),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistDataResponse:
    playlist = await playlist_service.create_playlist(identity, payload.model_dump())
    return PlaylistDataResponse(
        message="Playlist created successfully",
        data=PlaylistResponse.from_domain(playlist),
    )


@playlists_router.get(
    "",
    response_model=PlaylistListResponse,
    summary="List playlists",
    description="Public playlists plus the caller's own private ones",
)
async def list_playlists(
    mine: bool = Query(False, description="Only the caller's playlists"),
    is_public: Optional[bool] = Query(None),
    search: Optional[str] = Query(None, max_length=100, description="Search name or description"),
    pagination: PaginationParams = Depends(get_pagination_params),
    identity: Identity = Depends(get_current_identity),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistListResponse:
    playlists, total = await playlist_service.list_playlists(
        identity,
        offset=pagination.offset,
        limit=pagination.limit,
        owner_id=identity.id if mine else None,
        is_public=is_public,
        search=search,
    )
    return PlaylistListResponse(
        data=[PlaylistResponse.from_domain(playlist) for playlist in playlists],
        pagination=pagination.meta(total),
    )


@playlists_router.get(
    "/{playlist_id}",
    response_model=PlaylistDataResponse,
    summary="Get playlist",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Playlist not found"}},
)
async def get_playlist(
    playlist_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistDataResponse:
    playlist = await playlist_service.get_playlist(identity, playlist_id)
    return PlaylistDataResponse(data=PlaylistResponse.from_domain(playlist))


@playlists_router.put(
    "/{playlist_id}",
    response_model=PlaylistDataResponse,
    summary="Update playlist",
    responses=OWNER_RESPONSES,
)
async def update_playlist(
    payload: PlaylistUpdateRequest,
    playlist_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistDataResponse:
    playlist = await playlist_service.update_playlist(
        identity, playlist_id, payload.model_dump(exclude_unset=True)
    )
    return PlaylistDataResponse(
        message="Playlist updated successfully",
        data=PlaylistResponse.from_domain(playlist),
    )


@playlists_router.delete(
    "/{playlist_id}",
    response_model=MessageResponse,
    summary="Delete playlist",
    responses=OWNER_RESPONSES,
)
async def delete_playlist(
    playlist_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> MessageResponse:
    await playlist_service.delete_playlist(identity, playlist_id)
    return MessageResponse(message="Playlist deleted successfully")


# =============================================================================
# PLAYLIST SONGS
# =============================================================================

@playlists_router.get(
    "/{playlist_id}/songs",
    response_model=PlaylistSongListResponse,
    summary="List playlist songs",
    description="Songs ordered by position",
    responses={401: {"description": "Not authenticated"}, 404: {"description": "Playlist not found"}},
)
async def list_playlist_songs(
    playlist_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistSongListResponse:
    songs = await playlist_service.list_songs(identity, playlist_id)
    return PlaylistSongListResponse(data=[PlaylistSongResponse.from_domain(song) for song in songs])


@playlists_router.post(
    "/{playlist_id}/songs",
    response_model=PlaylistSongDataResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add song to playlist",
    responses={
        **OWNER_RESPONSES,
        404: {"description": "Playlist or music not found"},
        409: {"description": "Music already in playlist"},
    }
)
async def add_playlist_song(
    payload: PlaylistSongAddRequest,
    playlist_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistSongDataResponse:
    song = await playlist_service.add_song(identity, playlist_id, payload.music_id, payload.position)
    return PlaylistSongDataResponse(
        message="Music added to playlist",
        data=PlaylistSongResponse.from_domain(song),
    )


@playlists_router.put(
    "/{playlist_id}/songs/{music_id}",
    response_model=PlaylistSongDataResponse,
    summary="Move song within playlist",
    responses={**OWNER_RESPONSES, 404: {"description": "Playlist not found or music not in it"}},
)
async def move_playlist_song(
    payload: PlaylistSongMoveRequest,
    playlist_id: int = Path(..., ge=1),
    music_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> PlaylistSongDataResponse:
    song = await playlist_service.move_song(identity, playlist_id, music_id, payload.position)
    return PlaylistSongDataResponse(
        message="Playlist song updated",
        data=PlaylistSongResponse.from_domain(song),
    )


@playlists_router.delete(
    "/{playlist_id}/songs/{music_id}",
    response_model=MessageResponse,
    summary="Remove song from playlist",
    responses={**OWNER_RESPONSES, 404: {"description": "Playlist not found or music not in it"}},
)
async def remove_playlist_song(
    playlist_id: int = Path(..., ge=1),
    music_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    playlist_service: PlaylistService = Depends(get_playlist_service),
) -> MessageResponse:
    await playlist_service.remove_song(identity, playlist_id, music_id)
    return MessageResponse(message="Music removed from playlist")

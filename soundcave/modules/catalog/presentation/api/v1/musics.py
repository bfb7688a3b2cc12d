# 📄 File: soundcave/modules/catalog/presentation/api/v1/musics.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for the song catalog: browsing songs, adding and editing them, uploading
# audio, counting plays and liking songs.
#
# 🧪 Purpose (Technical Summary):
# FastAPI music endpoints. Reads are public; writes require admin, independent or
# label; likes require any authenticated caller.
#
# 🔗 Dependencies:
# - FastAPI router, UploadFile/Form (python-multipart)
# - soundcave.modules.catalog.domain.services.music_service
# - soundcave.modules.media (audio upload)
#
# 🔄 Connected Modules / Calls From:
# - soundcave.api.v1.router (router inclusion)

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Path, Query, UploadFile, status

from soundcave.modules.media.domain.services.media_service import MediaService
from soundcave.modules.media.presentation.dependencies import get_upload_service
from soundcave.shared.core.dependencies import (
    PaginationParams,
    get_current_identity,
    get_pagination_params,
)
from soundcave.shared.core.security import Identity
from soundcave.shared.utils.responses import MessageResponse

from ...dependencies import get_music_service, require_music_editor
from ....domain.services.music_service import MusicService
from ..schemas.music_schemas import (
    AudioUploadData,
    AudioUploadResponse,
    LikeData,
    LikeResponse,
    MusicCreateRequest,
    MusicDataResponse,
    MusicListResponse,
    MusicResponse,
    MusicUpdateRequest,
    PlayCountData,
    PlayCountResponse,
)

musics_router = APIRouter(prefix="/musics", tags=["Musics"])

WRITE_RESPONSES = {
    401: {"description": "Not authenticated"},
    403: {"description": "Admin, independent or label role required, or the artist is managed by another account"},
}


@musics_router.post(
    "/upload",
    response_model=AudioUploadResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload audio file",
    description="Upload an audio file and receive its public URL",
    responses={
        400: {"description": "Invalid file type"},
        413: {"description": "File too large"},
        503: {"description": "Storage unavailable"},
        **WRITE_RESPONSES,
    }
)
async def upload_audio(
    file: UploadFile = File(..., description="Audio file"),
    folder: Optional[str] = Form(None, description="Destination folder (default: musics)"),
    editor: Identity = Depends(require_music_editor),
    media_service: MediaService = Depends(get_upload_service),
) -> AudioUploadResponse:
    stored = await media_service.upload_audio(
        await file.read(),
        filename=file.filename or "audio",
        content_type=file.content_type,
        folder=folder,
    )
    return AudioUploadResponse(data=AudioUploadData(**stored))


@musics_router.post(
    "",
    response_model=MusicDataResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create music",
    responses={404: {"description": "Artist not found"}, **WRITE_RESPONSES},
)
async def create_music(
    payload: MusicCreateRequest,
    editor: Identity = Depends(require_music_editor),
    music_service: MusicService = Depends(get_music_service),
) -> MusicDataResponse:
    music = await music_service.create_music(editor, payload.model_dump())
    return MusicDataResponse(message="Music created successfully", data=MusicResponse.from_domain(music))


@musics_router.get(
    "",
    response_model=MusicListResponse,
    summary="List musics",
)
async def list_musics(
    artist_id: Optional[int] = Query(None, ge=1),
    genre: Optional[str] = Query(None, max_length=100),
    language: Optional[str] = Query(None, max_length=50),
    explicit: Optional[bool] = Query(None),
    search: Optional[str] = Query(None, max_length=100, description="Search title, artist or album"),
    pagination: PaginationParams = Depends(get_pagination_params),
    music_service: MusicService = Depends(get_music_service),
) -> MusicListResponse:
    musics, total = await music_service.list_musics(
        offset=pagination.offset,
        limit=pagination.limit,
        artist_id=artist_id,
        genre=genre,
        language=language,
        explicit=explicit,
        search=search,
    )
    return MusicListResponse(
        data=[MusicResponse.from_domain(music) for music in musics],
        pagination=pagination.meta(total),
    )


@musics_router.get(
    "/{music_id}",
    response_model=MusicDataResponse,
    summary="Get music",
    responses={404: {"description": "Music not found"}},
)
async def get_music(
    music_id: int = Path(..., ge=1),
    music_service: MusicService = Depends(get_music_service),
) -> MusicDataResponse:
    return MusicDataResponse(data=MusicResponse.from_domain(await music_service.get_music(music_id)))


@musics_router.put(
    "/{music_id}",
    response_model=MusicDataResponse,
    summary="Update music",
    responses={404: {"description": "Music or artist not found"}, **WRITE_RESPONSES},
)
async def update_music(
    payload: MusicUpdateRequest,
    music_id: int = Path(..., ge=1),
    editor: Identity = Depends(require_music_editor),
    music_service: MusicService = Depends(get_music_service),
) -> MusicDataResponse:
    music = await music_service.update_music(editor, music_id, payload.model_dump(exclude_unset=True))
    return MusicDataResponse(message="Music updated successfully", data=MusicResponse.from_domain(music))


@musics_router.delete(
    "/{music_id}",
    response_model=MessageResponse,
    summary="Delete music",
    responses={404: {"description": "Music not found"}, **WRITE_RESPONSES},
)
async def delete_music(
    music_id: int = Path(..., ge=1),
    editor: Identity = Depends(require_music_editor),
    music_service: MusicService = Depends(get_music_service),
) -> MessageResponse:
    await music_service.delete_music(editor, music_id)
    return MessageResponse(message="Music deleted successfully")


# =============================================================================
# ENGAGEMENT
# =============================================================================

@musics_router.post(
    "/{music_id}/play",
    response_model=PlayCountResponse,
    summary="Record a play",
    responses={404: {"description": "Music not found"}},
)
async def record_play(
    music_id: int = Path(..., ge=1),
    music_service: MusicService = Depends(get_music_service),
) -> PlayCountResponse:
    play_count = await music_service.record_play(music_id)
    return PlayCountResponse(data=PlayCountData(music_id=music_id, play_count=play_count))


@musics_router.post(
    "/{music_id}/like",
    response_model=LikeResponse,
    summary="Like a music",
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Music not found"},
        409: {"description": "Already liked"},
    }
)
async def like_music(
    music_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    music_service: MusicService = Depends(get_music_service),
) -> LikeResponse:
    like_count = await music_service.like(identity, music_id)
    return LikeResponse(
        message="Music liked",
        data=LikeData(music_id=music_id, like_count=like_count, liked=True),
    )


@musics_router.delete(
    "/{music_id}/like",
    response_model=LikeResponse,
    summary="Remove a like",
    responses={
        400: {"description": "Music was not liked"},
        401: {"description": "Not authenticated"},
        404: {"description": "Music not found"},
    }
)
async def unlike_music(
    music_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    music_service: MusicService = Depends(get_music_service),
) -> LikeResponse:
    like_count = await music_service.unlike(identity, music_id)
    return LikeResponse(
        message="Like removed",
        data=LikeData(music_id=music_id, like_count=like_count, liked=False),
    )

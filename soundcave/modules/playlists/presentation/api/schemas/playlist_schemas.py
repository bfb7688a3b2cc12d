# 📄 File: soundcave/modules/playlists/presentation/api/schemas/playlist_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines the playlist and playlist song information accepted and returned by the API.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the playlist endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - soundcave.modules.playlists.presentation.api.v1.playlists

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from soundcave.shared.utils.responses import PaginationMeta

from ....domain.models.playlist import Playlist, PlaylistSong


class PlaylistCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    is_public: bool = True
    cover_image: Optional[str] = Field(None, max_length=500)


class PlaylistUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=5000)
    is_public: Optional[bool] = None
    cover_image: Optional[str] = Field(None, max_length=500)


class PlaylistResponse(BaseModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    is_public: bool
    cover_image: Optional[str] = None
    song_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, playlist: Playlist) -> "PlaylistResponse":
        return cls(**playlist.model_dump(exclude={"deleted_at"}))


class PlaylistDataResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: PlaylistResponse


class PlaylistListResponse(BaseModel):
    success: bool = True
    data: List[PlaylistResponse]
    pagination: PaginationMeta


class PlaylistSongAddRequest(BaseModel):
    music_id: int = Field(..., ge=1)
    position: Optional[int] = Field(None, ge=0, description="Defaults to after the last song")


class PlaylistSongMoveRequest(BaseModel):
    position: int = Field(..., ge=0)


class PlaylistSongResponse(BaseModel):
    id: int
    playlist_id: int
    music_id: int
    position: int
    added_at: datetime
    title: Optional[str] = None
    artist: Optional[str] = None
    duration: Optional[str] = None
    audio_file_url: Optional[str] = None
    cover_image_url: Optional[str] = None

    @classmethod
    def from_domain(cls, song: PlaylistSong) -> "PlaylistSongResponse":
        return cls(**song.model_dump())


class PlaylistSongDataResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: PlaylistSongResponse


class PlaylistSongListResponse(BaseModel):
    success: bool = True
    data: List[PlaylistSongResponse]

# 📄 File: soundcave/modules/catalog/presentation/api/schemas/music_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines the song information accepted and returned by the API, plus the answers for
# plays, likes and audio uploads.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the music endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - soundcave.modules.catalog.presentation.api.v1.musics

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from soundcave.shared.utils.responses import PaginationMeta

from ....domain.models.music import DURATION_PATTERN, Music

DURATION_REGEX = DURATION_PATTERN.pattern


class MusicCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    artist: str = Field(..., min_length=1, max_length=255, description="Display artist name")
    artist_id: int = Field(..., ge=1)
    album: Optional[str] = Field(None, max_length=255)
    genre: str = Field(..., min_length=1, max_length=100)
    release_date: Optional[date] = Field(None, description="YYYY-MM-DD")
    duration: str = Field(..., pattern=DURATION_REGEX, description="MM:SS or HH:MM:SS")
    language: str = Field(..., min_length=1, max_length=50)
    explicit: bool = False
    lyrics: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[str] = None
    audio_file_url: str = Field(..., min_length=1, max_length=500)
    cover_image_url: Optional[str] = Field(None, max_length=500)


class MusicUpdateRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    artist: Optional[str] = Field(None, min_length=1, max_length=255)
    artist_id: Optional[int] = Field(None, ge=1)
    album: Optional[str] = Field(None, max_length=255)
    genre: Optional[str] = Field(None, min_length=1, max_length=100)
    release_date: Optional[date] = None
    duration: Optional[str] = Field(None, pattern=DURATION_REGEX)
    language: Optional[str] = Field(None, min_length=1, max_length=50)
    explicit: Optional[bool] = None
    lyrics: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[str] = None
    audio_file_url: Optional[str] = Field(None, min_length=1, max_length=500)
    cover_image_url: Optional[str] = Field(None, max_length=500)


class MusicResponse(BaseModel):
    id: int
    title: str
    artist: str
    artist_id: int
    album: Optional[str] = None
    genre: str
    release_date: Optional[date] = None
    duration: str
    language: str
    explicit: bool
    lyrics: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[str] = None
    audio_file_url: str
    cover_image_url: Optional[str] = None
    play_count: int
    like_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, music: Music) -> "MusicResponse":
        return cls(**music.model_dump(exclude={"deleted_at"}))


class MusicDataResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: MusicResponse


class MusicListResponse(BaseModel):
    success: bool = True
    data: List[MusicResponse]
    pagination: PaginationMeta


class PlayCountData(BaseModel):
    music_id: int
    play_count: int


class PlayCountResponse(BaseModel):
    success: bool = True
    message: str = "Play recorded"
    data: PlayCountData


class LikeData(BaseModel):
    music_id: int
    like_count: int
    liked: bool


class LikeResponse(BaseModel):
    success: bool = True
    message: str
    data: LikeData


class AudioUploadData(BaseModel):
    file_name: str
    file_url: str
    file_size: int
    content_type: str
    bucket_path: str


class AudioUploadResponse(BaseModel):
    success: bool = True
    message: str = "Audio uploaded successfully"
    data: AudioUploadData

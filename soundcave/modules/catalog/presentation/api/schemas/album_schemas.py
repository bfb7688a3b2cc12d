# 📄 File: soundcave/modules/catalog/presentation/api/schemas/album_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines the album information accepted when publishing or editing a release and what
# the API shows back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the album endpoints.
#
# 🔗 Dependencies:
# - pydantic
#
# 🔄 Connected Modules / Calls From:
# - soundcave.modules.catalog.presentation.api.v1.albums

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from soundcave.shared.utils.responses import PaginationMeta

from ....domain.models.album import Album, AlbumType


class AlbumCreateRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    artist_id: int = Field(..., ge=1)
    artist: str = Field(..., min_length=1, max_length=255, description="Display artist name")
    release_date: date = Field(..., description="YYYY-MM-DD")
    album_type: AlbumType
    genre: Optional[str] = Field(None, max_length=100)
    total_tracks: int = Field(0, ge=0)
    record_label: Optional[str] = Field(None, max_length=255)
    image: Optional[str] = Field(None, max_length=500)


class AlbumUpdateRequest(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    artist_id: Optional[int] = Field(None, ge=1)
    artist: Optional[str] = Field(None, min_length=1, max_length=255)
    release_date: Optional[date] = None
    album_type: Optional[AlbumType] = None
    genre: Optional[str] = Field(None, max_length=100)
    total_tracks: Optional[int] = Field(None, ge=0)
    record_label: Optional[str] = Field(None, max_length=255)
    image: Optional[str] = Field(None, max_length=500)


class AlbumResponse(BaseModel):
    id: int
    title: str
    artist_id: int
    artist: str
    release_date: date
    album_type: AlbumType
    genre: Optional[str] = None
    total_tracks: int
    record_label: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, album: Album) -> "AlbumResponse":
        return cls(**album.model_dump(exclude={"deleted_at"}))


class AlbumDataResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: AlbumResponse


class AlbumListResponse(BaseModel):
    success: bool = True
    data: List[AlbumResponse]
    pagination: PaginationMeta

# 📄 File: soundcave/modules/catalog/presentation/api/schemas/artist_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines the information accepted when creating or editing an artist page and what the
# API shows back, including the follower total.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the artist endpoints.
#
# 🔗 Dependencies:
# - pydantic (EmailStr via email-validator)
#
# 🔄 Connected Modules / Calls From:
# - soundcave.modules.catalog.presentation.api.v1.artists

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field

from soundcave.shared.utils.responses import PaginationMeta

from ....domain.models.artist import Artist


class ArtistCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    bio: str = Field("", max_length=5000)
    genre: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    debut_year: Optional[str] = Field(None, pattern=r"^\d{4}$", description="YYYY")
    website: Optional[str] = Field(None, max_length=255)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    social_media: Dict[str, Any] = Field(default_factory=dict, description="e.g. {\"instagram\": \"@name\"}")
    profile_image: Optional[str] = Field(None, max_length=255)
    ref_user_id: Optional[int] = Field(None, ge=1, description="Managing account")


class ArtistUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    bio: Optional[str] = Field(None, max_length=5000)
    genre: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    debut_year: Optional[str] = Field(None, pattern=r"^\d{4}$")
    website: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    social_media: Optional[Dict[str, Any]] = None
    profile_image: Optional[str] = Field(None, max_length=255)
    ref_user_id: Optional[int] = Field(None, ge=1)


class ArtistResponse(BaseModel):
    id: int
    ref_user_id: Optional[int] = None
    name: str
    bio: str
    genre: Optional[str] = None
    country: Optional[str] = None
    debut_year: Optional[str] = None
    website: Optional[str] = None
    email: str
    phone: Optional[str] = None
    social_media: Dict[str, Any] = Field(default_factory=dict)
    profile_image: Optional[str] = None
    total_follower: int = 0
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, artist: Artist, follower_count: int) -> "ArtistResponse":
        return cls(
            **artist.model_dump(exclude={"deleted_at"}),
            total_follower=follower_count,
        )


class ArtistDataResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: ArtistResponse


class ArtistListResponse(BaseModel):
    success: bool = True
    data: List[ArtistResponse]
    pagination: PaginationMeta

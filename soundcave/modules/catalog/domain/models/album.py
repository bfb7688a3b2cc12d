# 📄 File: soundcave/modules/catalog/domain/models/album.py
# 🧭 Purpose (Layman Explanation):
# Describes an album release: its title, which artist put it out, when, what kind of
# release it is (single, EP, full album or compilation) and its cover.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for Album releases with a closed release type enum.
# 🔗 Dependencies:
# pydantic, datetime, enum
# 🔄 Connected Modules / Calls From:
# album_service.py, album_repository.py

from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AlbumType(str, Enum):
    """Kind of release."""
    SINGLE = "single"
    EP = "EP"
    ALBUM = "album"
    COMPILATION = "compilation"


class Album(BaseModel):
    """Album domain model. Owned through its artist."""

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    title: str
    artist_id: int
    artist: str
    release_date: date
    album_type: AlbumType
    genre: Optional[str] = None
    total_tracks: int = Field(0, ge=0)
    record_label: Optional[str] = None
    image: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

# 📄 File: soundcave/modules/catalog/domain/models/music.py
# 🧭 Purpose (Layman Explanation):
# Describes a song in the SoundCave catalog: title, who made it, its audio file and cover,
# and how many times it was played and liked.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for Music tracks. Play count is stored on the row; like count is
# derived from the music_likes table when loaded.
# 🔗 Dependencies:
# pydantic, datetime
# 🔄 Connected Modules / Calls From:
# music_service.py, music_repository.py

import re
from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# MM:SS or HH:MM:SS
DURATION_PATTERN = re.compile(r"^(\d{1,2}:)?[0-5]?\d:[0-5]\d$")


class Music(BaseModel):
    """Music track domain model."""

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    title: str
    artist: str
    artist_id: int
    album: Optional[str] = None
    genre: str
    release_date: Optional[date] = None
    duration: str
    language: str
    explicit: bool = False
    lyrics: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[str] = None
    audio_file_url: str
    cover_image_url: Optional[str] = None
    play_count: int = 0
    like_count: int = 0

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: str) -> str:
        v = v.strip()
        if not DURATION_PATTERN.match(v):
            raise ValueError("Duration must be MM:SS or HH:MM:SS")
        return v

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

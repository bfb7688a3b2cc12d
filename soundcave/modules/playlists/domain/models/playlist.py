# 📄 File: soundcave/modules/playlists/domain/models/playlist.py
# 🧭 Purpose (Layman Explanation):
# Describes a playlist (its owner, name and whether others can see it) and each song
# placed in it.
# 🧪 Purpose (Technical Summary):
# Pydantic domain models for playlists and playlist entries. ``song_count`` and the
# track fields on an entry are read from the database, never stored on the row.
# 🔗 Dependencies:
# pydantic, datetime
# 🔄 Connected Modules / Calls From:
# playlist_service.py, playlist_repository.py

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Playlist(BaseModel):
    """Playlist domain model."""

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    user_id: int
    name: str
    description: Optional[str] = None
    is_public: bool = True
    cover_image: Optional[str] = None
    song_count: int = 0

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)


class PlaylistSong(BaseModel):
    """A track at a position in a playlist, with the track details for display."""

    id: Optional[int] = None
    playlist_id: int
    music_id: int
    position: int = Field(0, ge=0)
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    title: Optional[str] = None
    artist: Optional[str] = None
    duration: Optional[str] = None
    audio_file_url: Optional[str] = None
    cover_image_url: Optional[str] = None

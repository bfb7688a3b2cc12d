# 📄 File: soundcave/modules/playlists/domain/repositories/playlist_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how playlists and the songs in them are saved, found and removed.
# 🧪 Purpose (Technical Summary):
# Repository interface for playlists and playlist entries. Soft-deleted playlists are
# hidden; entries are removed outright.
# 🔗 Dependencies:
# Domain models (Playlist, PlaylistSong), typing, abc
# 🔄 Connected Modules / Calls From:
# playlist_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models.playlist import Playlist, PlaylistSong


class PlaylistRepository(ABC):
    """Repository interface for Playlist data access."""

    @abstractmethod
    async def create(self, playlist: Playlist) -> Playlist:
        pass

    @abstractmethod
    async def get_by_id(self, playlist_id: int) -> Optional[Playlist]:
        """Get an active playlist with its song count."""

    @abstractmethod
    async def list_playlists(
        self,
        offset: int = 0,
        limit: int = 10,
        viewer_id: Optional[int] = None,
        owner_id: Optional[int] = None,
        is_public: Optional[bool] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Playlist], int]:
        """
        Return a page of active playlists (newest first) and the total count.

        With ``viewer_id`` set, private playlists of other owners are left out;
        without it every playlist is listed.
        """

    @abstractmethod
    async def update(self, playlist: Playlist) -> Playlist:
        pass

    @abstractmethod
    async def soft_delete(self, playlist_id: int) -> bool:
        pass

    # =========================================================================
    # SONGS
    # =========================================================================

    @abstractmethod
    async def add_song(self, playlist_id: int, music_id: int, position: int) -> PlaylistSong:
        """Raises ConflictError when the track is already in the playlist."""

    @abstractmethod
    async def get_song(self, playlist_id: int, music_id: int) -> Optional[PlaylistSong]:
        pass

    @abstractmethod
    async def list_songs(self, playlist_id: int) -> List[PlaylistSong]:
        """Entries ordered by position; tracks removed from the catalog are left out."""

    @abstractmethod
    async def next_position(self, playlist_id: int) -> int:
        """One past the highest position, or 0 for an empty playlist."""

    @abstractmethod
    async def set_position(self, playlist_id: int, music_id: int, position: int) -> Optional[PlaylistSong]:
        pass

    @abstractmethod
    async def remove_song(self, playlist_id: int, music_id: int) -> bool:
        pass

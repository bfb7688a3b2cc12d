# 📄 File: soundcave/modules/catalog/domain/repositories/music_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how songs, their play counts and their likes are saved and looked up.
# 🧪 Purpose (Technical Summary):
# Repository interface for Music entities and the music_likes relationship.
# 🔗 Dependencies:
# Domain models (Music), typing, abc
# 🔄 Connected Modules / Calls From:
# music_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models.music import Music


class MusicRepository(ABC):
    """
    Repository interface for Music data access.

    Implementation Notes:
    - ``like_count`` on returned entities is computed from music_likes
    - Play counts change only through ``increment_play_count``
    """

    @abstractmethod
    async def create(self, music: Music) -> Music:
        pass

    @abstractmethod
    async def get_by_id(self, music_id: int) -> Optional[Music]:
        pass

    @abstractmethod
    async def list_musics(
        self,
        offset: int = 0,
        limit: int = 10,
        artist_id: Optional[int] = None,
        genre: Optional[str] = None,
        language: Optional[str] = None,
        explicit: Optional[bool] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Music], int]:
        pass

    @abstractmethod
    async def update(self, music: Music) -> Music:
        pass

    @abstractmethod
    async def soft_delete(self, music_id: int) -> bool:
        pass

    @abstractmethod
    async def increment_play_count(self, music_id: int) -> Optional[int]:
        """
        Atomically add one play.

        Returns:
            The new play count, or None when no active track matched
        """

    @abstractmethod
    async def add_like(self, user_id: int, music_id: int) -> None:
        """Raises ConflictError when the user already likes the track."""

    @abstractmethod
    async def remove_like(self, user_id: int, music_id: int) -> bool:
        """False when there was no like to remove."""

    @abstractmethod
    async def count_likes(self, music_id: int) -> int:
        pass

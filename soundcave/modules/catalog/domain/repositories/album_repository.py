# 📄 File: soundcave/modules/catalog/domain/repositories/album_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how album releases are saved, found and removed.
# 🧪 Purpose (Technical Summary):
# Repository interface for Album entities. Soft-deleted rows are hidden.
# 🔗 Dependencies:
# Domain models (Album, AlbumType), typing, abc
# 🔄 Connected Modules / Calls From:
# album_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models.album import Album, AlbumType


class AlbumRepository(ABC):
    """Repository interface for Album data access."""

    @abstractmethod
    async def create(self, album: Album) -> Album:
        pass

    @abstractmethod
    async def get_by_id(self, album_id: int) -> Optional[Album]:
        pass

    @abstractmethod
    async def list_albums(
        self,
        offset: int = 0,
        limit: int = 10,
        artist_id: Optional[int] = None,
        album_type: Optional[AlbumType] = None,
        genre: Optional[str] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Album], int]:
        """Return a page of active albums (newest release first) and the total count."""

    @abstractmethod
    async def update(self, album: Album) -> Album:
        pass

    @abstractmethod
    async def soft_delete(self, album_id: int) -> bool:
        pass

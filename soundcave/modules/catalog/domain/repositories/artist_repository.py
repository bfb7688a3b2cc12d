# 📄 File: soundcave/modules/catalog/domain/repositories/artist_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how artist pages are saved and looked up, without tying the rules to a
# particular database.
# 🧪 Purpose (Technical Summary):
# Repository interface for Artist entities.
# 🔗 Dependencies:
# Domain models (Artist), typing, abc
# 🔄 Connected Modules / Calls From:
# artist_service.py, follow_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models.artist import Artist


class ArtistRepository(ABC):
    """Repository interface for Artist data access. Soft-deleted rows are hidden."""

    @abstractmethod
    async def create(self, artist: Artist) -> Artist:
        """Raises ConflictError when a constraint rejects the row, such as an unknown manager account."""

    @abstractmethod
    async def get_by_id(self, artist_id: int, for_update: bool = False) -> Optional[Artist]:
        """Get an active artist; ``for_update`` locks the row until the transaction ends."""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Artist]:
        pass

    @abstractmethod
    async def list_artists(
        self,
        offset: int = 0,
        limit: int = 10,
        genre: Optional[str] = None,
        country: Optional[str] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Artist], int]:
        """Return a page of active artists (newest first) and the total count."""

    @abstractmethod
    async def update(self, artist: Artist) -> Artist:
        pass

    @abstractmethod
    async def soft_delete(self, artist_id: int) -> bool:
        pass

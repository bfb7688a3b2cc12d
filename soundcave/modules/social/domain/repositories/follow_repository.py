# 📄 File: soundcave/modules/social/domain/repositories/follow_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how follows are recorded, removed and counted.
# 🧪 Purpose (Technical Summary):
# Repository interface for follow edges. Follower counts are always derived from the
# edges themselves.
# 🔗 Dependencies:
# Domain models (Follow, FollowTargetType), typing, abc
# 🔄 Connected Modules / Calls From:
# follow_service.py, artist_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import Dict, Iterable

from ..models.follow import Follow, FollowTargetType


class FollowRepository(ABC):
    """Repository interface for follow edges."""

    @abstractmethod
    async def exists(self, fan_id: int, target_type: FollowTargetType, target_id: int) -> bool:
        pass

    @abstractmethod
    async def add(self, fan_id: int, target_type: FollowTargetType, target_id: int) -> Follow:
        """
        Insert an edge.

        Raises:
            ConflictError: If the edge already exists, including when a
                concurrent insert wins the unique constraint
        """

    @abstractmethod
    async def remove(self, fan_id: int, target_type: FollowTargetType, target_id: int) -> bool:
        """Delete an edge; False when there was none."""

    @abstractmethod
    async def count_followers(self, target_type: FollowTargetType, target_id: int) -> int:
        pass

    @abstractmethod
    async def count_followers_for(
        self,
        target_type: FollowTargetType,
        target_ids: Iterable[int]
    ) -> Dict[int, int]:
        """Follower counts for many targets in one query; targets without fans are omitted."""

# 📄 File: soundcave/modules/social/domain/services/follow_service.py
# 🧭 Purpose (Layman Explanation):
# The rules for following: only listeners can follow, nobody can follow themselves,
# you can only follow artists and labels, and you cannot follow the same one twice.
# 🧪 Purpose (Technical Summary):
# Domain service for the follow relationship. Locks the target row, validates the
# relationship invariants, mutates the edge table and recomputes the follower count
# inside one transaction.
# 🔗 Dependencies:
# FollowRepository, UserRepository, ArtistRepository, soundcave.shared.core.security
# 🔄 Connected Modules / Calls From:
# Follow API endpoints (users and artists)

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.modules.catalog.domain.repositories.artist_repository import ArtistRepository
from soundcave.modules.user_management.domain.repositories.user_repository import UserRepository
from soundcave.shared.core.exceptions import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from soundcave.shared.core.roles import Role
from soundcave.shared.core.security import Identity, require_role

from ..models.follow import FollowResult, FollowTargetType
from ..repositories.follow_repository import FollowRepository

logger = logging.getLogger(__name__)


class FollowService:
    """
    Domain service for follow relationships.

    Business rules:
    - Only identities with role ``user`` may follow or unfollow
    - A user target must hold role independent or label
    - Self-follow is a conflict, whether by id or through a managed artist page
    - Each (fan, target) edge exists at most once
    - Follower counts are always recomputed from the edge table

    Serialization:
    The target row is read FOR UPDATE before the edge is checked and written,
    and the unique constraint on the edge table rejects any concurrent
    duplicate that slips past the check.
    """

    def __init__(
        self,
        session: AsyncSession,
        follow_repository: FollowRepository,
        user_repository: UserRepository,
        artist_repository: ArtistRepository
    ):
        self._session = session
        self.follow_repository = follow_repository
        self.user_repository = user_repository
        self.artist_repository = artist_repository

    # =========================================================================
    # COMMANDS
    # =========================================================================

    async def follow(self, fan: Identity, target_type: FollowTargetType, target_id: int) -> FollowResult:
        """
        Create a follow edge from ``fan`` to the target.

        Raises:
            AuthorizationError: If the fan's role is not ``user``
            ConflictError: On self-follow or when already following
            NotFoundError: If the target does not exist
            ValidationError: If a user target cannot be followed
        """
        require_role(fan, Role.USER)

        if target_type == FollowTargetType.USER and target_id == fan.id:
            raise ConflictError("You cannot follow yourself", resource_type="follow")

        target_name = await self._lock_target(fan, target_type, target_id, for_follow=True)

        if await self.follow_repository.exists(fan.id, target_type, target_id):
            raise ConflictError(
                "Already following this account",
                resource_type="follow",
                details={"target_type": target_type.value, "target_id": target_id},
            )

        await self.follow_repository.add(fan.id, target_type, target_id)
        count = await self.follow_repository.count_followers(target_type, target_id)
        await self._session.commit()

        logger.info(f"User {fan.id} followed {target_type.value} {target_id} (followers: {count})")
        return FollowResult(
            target_id=target_id,
            target_type=target_type,
            target_name=target_name,
            follower_count=count,
        )

    async def unfollow(self, fan: Identity, target_type: FollowTargetType, target_id: int) -> FollowResult:
        """
        Remove the follow edge from ``fan`` to the target.

        Raises:
            AuthorizationError: If the fan's role is not ``user``
            NotFoundError: If the target does not exist
            InvalidStateError: If the fan is not following the target
        """
        require_role(fan, Role.USER)

        target_name = await self._lock_target(fan, target_type, target_id, for_follow=False)

        removed = await self.follow_repository.remove(fan.id, target_type, target_id)
        if not removed:
            raise InvalidStateError("You are not following this account", resource_type="follow")

        count = await self.follow_repository.count_followers(target_type, target_id)
        await self._session.commit()

        logger.info(f"User {fan.id} unfollowed {target_type.value} {target_id} (followers: {count})")
        return FollowResult(
            target_id=target_id,
            target_type=target_type,
            target_name=target_name,
            follower_count=count,
        )

    # =========================================================================
    # QUERIES
    # =========================================================================

    async def follower_count(self, target_type: FollowTargetType, target_id: int) -> FollowResult:
        """Current follower count of an existing target."""
        target_name = await self._target_name(target_type, target_id)
        count = await self.follow_repository.count_followers(target_type, target_id)
        return FollowResult(
            target_id=target_id,
            target_type=target_type,
            target_name=target_name,
            follower_count=count,
        )

    async def is_following(self, fan_id: int, target_type: FollowTargetType, target_id: int) -> bool:
        return await self.follow_repository.exists(fan_id, target_type, target_id)

    # =========================================================================
    # HELPERS
    # =========================================================================

    async def _lock_target(
        self,
        fan: Identity,
        target_type: FollowTargetType,
        target_id: int,
        for_follow: bool
    ) -> str:
        """Lock the target row and check it can take part in a follow change."""
        if target_type == FollowTargetType.USER:
            user = await self.user_repository.get_by_id(target_id, for_update=True)
            if user is None:
                raise NotFoundError("User not found", resource_type="user", resource_id=target_id)
            if for_follow and not user.is_followable:
                raise ValidationError(
                    "Only independent artists and labels can be followed",
                    field="target_user_id",
                    value=target_id,
                    details={"target_role": user.role.value},
                )
            return user.full_name

        artist = await self.artist_repository.get_by_id(target_id, for_update=True)
        if artist is None:
            raise NotFoundError("Artist not found", resource_type="artist", resource_id=target_id)
        if for_follow and artist.is_managed_by(fan.id):
            raise ConflictError("You cannot follow your own artist page", resource_type="follow")
        return artist.name

    async def _target_name(self, target_type: FollowTargetType, target_id: int) -> str:
        name: Optional[str] = None
        if target_type == FollowTargetType.USER:
            user = await self.user_repository.get_by_id(target_id)
            name = user.full_name if user else None
        else:
            artist = await self.artist_repository.get_by_id(target_id)
            name = artist.name if artist else None

        if name is None:
            raise NotFoundError(
                f"{target_type.value.capitalize()} not found",
                resource_type=target_type.value,
                resource_id=target_id,
            )
        return name

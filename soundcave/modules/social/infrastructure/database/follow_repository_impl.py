# 📄 File: soundcave/modules/social/infrastructure/database/follow_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Records and removes follows in the database and counts how many fans someone has.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of FollowRepository over the follows edge table. Unique
# constraint violations from concurrent inserts are reported as conflicts.
#
# 🔗 Dependencies:
# - SQLAlchemy async session, FollowModel
#
# 🔄 Connected Modules / Calls From:
# - follow_service.py, artist_service.py

import logging
from typing import Dict, Iterable

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.core.exceptions import ConflictError

from ...domain.models.follow import Follow, FollowTargetType
from ...domain.repositories.follow_repository import FollowRepository
from .models import FollowModel

logger = logging.getLogger(__name__)


class FollowRepositoryImpl(FollowRepository):
    """SQLAlchemy implementation of the FollowRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def exists(self, fan_id: int, target_type: FollowTargetType, target_id: int) -> bool:
        edge_id = await self._session.scalar(
            select(FollowModel.id).where(
                FollowModel.fan_id == fan_id,
                FollowModel.target_type == target_type.value,
                FollowModel.target_id == target_id,
            )
        )
        return edge_id is not None

    async def add(self, fan_id: int, target_type: FollowTargetType, target_id: int) -> Follow:
        model = FollowModel(fan_id=fan_id, target_type=target_type.value, target_id=target_id)
        try:
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            logger.info(f"Follow rejected by constraint: fan {fan_id} -> {target_type.value} {target_id}")
            raise ConflictError(
                "Already following this account",
                resource_type="follow",
                details={"target_type": target_type.value, "target_id": target_id},
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error creating follow edge: {e}")
            raise

        logger.debug(f"Follow edge created: fan {fan_id} -> {target_type.value} {target_id}")
        return Follow(
            id=model.id,
            fan_id=fan_id,
            target_type=target_type,
            target_id=target_id,
        )

    async def remove(self, fan_id: int, target_type: FollowTargetType, target_id: int) -> bool:
        result = await self._session.execute(
            delete(FollowModel).where(
                FollowModel.fan_id == fan_id,
                FollowModel.target_type == target_type.value,
                FollowModel.target_id == target_id,
            )
        )
        return result.rowcount > 0

    async def count_followers(self, target_type: FollowTargetType, target_id: int) -> int:
        count = await self._session.scalar(
            select(func.count())
            .select_from(FollowModel)
            .where(
                FollowModel.target_type == target_type.value,
                FollowModel.target_id == target_id,
            )
        )
        return int(count or 0)

    async def count_followers_for(
        self,
        target_type: FollowTargetType,
        target_ids: Iterable[int]
    ) -> Dict[int, int]:
        ids = list(target_ids)
        if not ids:
            return {}
        result = await self._session.execute(
            select(FollowModel.target_id, func.count())
            .where(
                FollowModel.target_type == target_type.value,
                FollowModel.target_id.in_(ids),
            )
            .group_by(FollowModel.target_id)
        )
        return {target_id: count for target_id, count in result.all()}

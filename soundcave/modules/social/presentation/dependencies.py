"""
Dependency providers for the follow endpoints.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.modules.catalog.infrastructure.database.artist_repository_impl import ArtistRepositoryImpl
from soundcave.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from soundcave.shared.config.database import get_db

from ..domain.repositories.follow_repository import FollowRepository
from ..domain.services.follow_service import FollowService
from ..infrastructure.database.follow_repository_impl import FollowRepositoryImpl


def get_follow_repository(db: AsyncSession = Depends(get_db)) -> FollowRepository:
    return FollowRepositoryImpl(db)


def get_follow_service(
    db: AsyncSession = Depends(get_db),
    follow_repository: FollowRepository = Depends(get_follow_repository),
) -> FollowService:
    return FollowService(
        session=db,
        follow_repository=follow_repository,
        user_repository=UserRepositoryImpl(db),
        artist_repository=ArtistRepositoryImpl(db),
    )

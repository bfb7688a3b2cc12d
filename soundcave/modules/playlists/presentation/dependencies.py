"""
Dependency providers for the playlist endpoints.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.modules.catalog.infrastructure.database.music_repository_impl import MusicRepositoryImpl
from soundcave.shared.config.database import get_db

from ..domain.services.playlist_service import PlaylistService
from ..infrastructure.database.playlist_repository_impl import PlaylistRepositoryImpl


def get_playlist_service(db: AsyncSession = Depends(get_db)) -> PlaylistService:
    return PlaylistService(db, PlaylistRepositoryImpl(db), MusicRepositoryImpl(db))

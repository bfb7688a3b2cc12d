"""
Dependency providers and role gates for catalog endpoints.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.modules.social.infrastructure.database.follow_repository_impl import FollowRepositoryImpl
from soundcave.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from soundcave.shared.config.database import get_db
from soundcave.shared.core.dependencies import require_any_role
from soundcave.shared.core.roles import Role

from ..domain.services.album_service import AlbumService
from ..domain.services.artist_service import ArtistService
from ..domain.services.music_service import MusicService
from ..infrastructure.database.album_repository_impl import AlbumRepositoryImpl
from ..infrastructure.database.artist_repository_impl import ArtistRepositoryImpl
from ..infrastructure.database.music_repository_impl import MusicRepositoryImpl

# Who may create, edit and delete catalog entries; services also check artist ownership
require_artist_editor = require_any_role([Role.ADMIN, Role.LABEL])
require_music_editor = require_any_role([Role.ADMIN, Role.INDEPENDENT, Role.LABEL])


def get_artist_service(db: AsyncSession = Depends(get_db)) -> ArtistService:
    return ArtistService(db, ArtistRepositoryImpl(db), FollowRepositoryImpl(db), UserRepositoryImpl(db))


def get_music_service(db: AsyncSession = Depends(get_db)) -> MusicService:
    return MusicService(db, MusicRepositoryImpl(db), ArtistRepositoryImpl(db))


def get_album_service(db: AsyncSession = Depends(get_db)) -> AlbumService:
    return AlbumService(db, AlbumRepositoryImpl(db), ArtistRepositoryImpl(db))

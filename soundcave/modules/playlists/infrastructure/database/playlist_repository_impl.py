# 📄 File: soundcave/modules/playlists/infrastructure/database/playlist_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves and finds playlists in the database, and keeps track of which songs are in each
# playlist and in what order.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PlaylistRepository. Song counts are grouped counts over
# playlist_songs; entries are joined with active catalog tracks for display.
#
# 🔗 Dependencies:
# - SQLAlchemy async session, playlist ORM models, catalog MusicModel
#
# 🔄 Connected Modules / Calls From:
# - playlist_service.py

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.modules.catalog.infrastructure.database.models import MusicModel
from soundcave.shared.core.exceptions import ConflictError, NotFoundError

from ...domain.models.playlist import Playlist, PlaylistSong
from ...domain.repositories.playlist_repository import PlaylistRepository
from .models import PlaylistModel, PlaylistSongModel

logger = logging.getLogger(__name__)


class PlaylistRepositoryImpl(PlaylistRepository):
    """SQLAlchemy implementation of the PlaylistRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, playlist: Playlist) -> Playlist:
        model = PlaylistModel(
            user_id=playlist.user_id,
            name=playlist.name,
            description=playlist.description,
            is_public=playlist.is_public,
            cover_image=playlist.cover_image,
            created_at=playlist.created_at,
            updated_at=playlist.updated_at,
        )
        try:
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error during playlist creation: {e}")
            raise

        logger.info(f"Created playlist with ID: {model.id}")
        return self._model_to_domain(model, song_count=0)

    async def get_by_id(self, playlist_id: int) -> Optional[Playlist]:
        model = await self._get_active(playlist_id)
        if model is None:
            return None
        counts = await self._count_songs_for([model.id])
        return self._model_to_domain(model, song_count=counts.get(model.id, 0))

    async def list_playlists(
        self,
        offset: int = 0,
        limit: int = 10,
        viewer_id: Optional[int] = None,
        owner_id: Optional[int] = None,
        is_public: Optional[bool] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Playlist], int]:
        conditions = [PlaylistModel.deleted_at.is_(None)]
        if viewer_id is not None:
            conditions.append(or_(PlaylistModel.is_public.is_(True), PlaylistModel.user_id == viewer_id))
        if owner_id is not None:
            conditions.append(PlaylistModel.user_id == owner_id)
        if is_public is not None:
            conditions.append(PlaylistModel.is_public.is_(is_public))
        if search:
            pattern = f"%{search.strip().lower()}%"
            conditions.append(
                or_(
                    func.lower(PlaylistModel.name).like(pattern),
                    func.lower(PlaylistModel.description).like(pattern),
                )
            )

        try:
            total = await self._session.scalar(
                select(func.count()).select_from(PlaylistModel).where(*conditions)
            )
            result = await self._session.execute(
                select(PlaylistModel)
                .where(*conditions)
                .order_by(PlaylistModel.created_at.desc(), PlaylistModel.id.desc())
                .offset(offset)
                .limit(limit)
            )
            models = result.scalars().all()
            counts = await self._count_songs_for(model.id for model in models)
        except SQLAlchemyError as e:
            logger.error(f"Database error listing playlists: {e}")
            raise

        return [self._model_to_domain(m, song_count=counts.get(m.id, 0)) for m in models], int(total or 0)

    async def update(self, playlist: Playlist) -> Playlist:
        model = await self._get_active(playlist.id)
        if model is None:
            raise NotFoundError("Playlist not found", resource_type="playlist", resource_id=playlist.id)

        model.name = playlist.name
        model.description = playlist.description
        model.is_public = playlist.is_public
        model.cover_image = playlist.cover_image
        model.updated_at = datetime.now(timezone.utc)

        await self._session.flush()
        await self._session.refresh(model)
        return self._model_to_domain(model, song_count=playlist.song_count)

    async def soft_delete(self, playlist_id: int) -> bool:
        now = datetime.now(timezone.utc)
        result = await self._session.execute(
            update(PlaylistModel)
            .where(PlaylistModel.id == playlist_id, PlaylistModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        return result.rowcount > 0

    # =========================================================================
    # SONGS
    # =========================================================================

    async def add_song(self, playlist_id: int, music_id: int, position: int) -> PlaylistSong:
        if await self._get_song_model(playlist_id, music_id) is not None:
            raise ConflictError(
                "Music is already in this playlist",
                resource_type="playlist_song",
                details={"playlist_id": playlist_id, "music_id": music_id},
            )

        model = PlaylistSongModel(
            playlist_id=playlist_id,
            music_id=music_id,
            position=position,
            created_at=datetime.now(timezone.utc),
        )
        try:
            self._session.add(model)
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            logger.info(f"Concurrent duplicate of music {music_id} in playlist {playlist_id}")
            raise ConflictError(
                "Music is already in this playlist",
                resource_type="playlist_song",
                details={"playlist_id": playlist_id, "music_id": music_id},
            ) from e

        return await self.get_song(playlist_id, music_id)

    async def get_song(self, playlist_id: int, music_id: int) -> Optional[PlaylistSong]:
        result = await self._session.execute(
            self._songs_query(playlist_id).where(PlaylistSongModel.music_id == music_id)
        )
        row = result.first()
        return self._row_to_song(*row) if row else None

    async def list_songs(self, playlist_id: int) -> List[PlaylistSong]:
        result = await self._session.execute(
            self._songs_query(playlist_id).order_by(PlaylistSongModel.position.asc(), PlaylistSongModel.id.asc())
        )
        return [self._row_to_song(song, music) for song, music in result.all()]

    async def next_position(self, playlist_id: int) -> int:
        highest = await self._session.scalar(
            select(func.max(PlaylistSongModel.position)).where(PlaylistSongModel.playlist_id == playlist_id)
        )
        return 0 if highest is None else highest + 1

    async def set_position(self, playlist_id: int, music_id: int, position: int) -> Optional[PlaylistSong]:
        model = await self._get_song_model(playlist_id, music_id)
        if model is None:
            return None
        model.position = position
        await self._session.flush()
        return await self.get_song(playlist_id, music_id)

    async def remove_song(self, playlist_id: int, music_id: int) -> bool:
        result = await self._session.execute(
            delete(PlaylistSongModel).where(
                PlaylistSongModel.playlist_id == playlist_id,
                PlaylistSongModel.music_id == music_id,
            )
        )
        return result.rowcount > 0

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _songs_query(self, playlist_id: int):
        return (
            select(PlaylistSongModel, MusicModel)
            .join(MusicModel, MusicModel.id == PlaylistSongModel.music_id)
            .where(
                PlaylistSongModel.playlist_id == playlist_id,
                MusicModel.deleted_at.is_(None),
            )
        )

    async def _get_song_model(self, playlist_id: int, music_id: int) -> Optional[PlaylistSongModel]:
        result = await self._session.execute(
            select(PlaylistSongModel).where(
                PlaylistSongModel.playlist_id == playlist_id,
                PlaylistSongModel.music_id == music_id,
            )
        )
        return result.scalar_one_or_none()

    async def _count_songs_for(self, playlist_ids: Iterable[int]) -> Dict[int, int]:
        ids = list(playlist_ids)
        if not ids:
            return {}
        result = await self._session.execute(
            select(PlaylistSongModel.playlist_id, func.count())
            .join(MusicModel, MusicModel.id == PlaylistSongModel.music_id)
            .where(PlaylistSongModel.playlist_id.in_(ids), MusicModel.deleted_at.is_(None))
            .group_by(PlaylistSongModel.playlist_id)
        )
        return {playlist_id: count for playlist_id, count in result.all()}

    async def _get_active(self, playlist_id: int) -> Optional[PlaylistModel]:
        result = await self._session.execute(
            select(PlaylistModel).where(PlaylistModel.id == playlist_id, PlaylistModel.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    def _row_to_song(self, song: PlaylistSongModel, music: MusicModel) -> PlaylistSong:
        return PlaylistSong(
            id=song.id,
            playlist_id=song.playlist_id,
            music_id=song.music_id,
            position=song.position,
            added_at=song.created_at,
            title=music.title,
            artist=music.artist,
            duration=music.duration,
            audio_file_url=music.audio_file_url,
            cover_image_url=music.cover_image_url,
        )

    def _model_to_domain(self, model: PlaylistModel, song_count: int) -> Playlist:
        return Playlist(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            description=model.description,
            is_public=model.is_public,
            cover_image=model.cover_image,
            song_count=song_count,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

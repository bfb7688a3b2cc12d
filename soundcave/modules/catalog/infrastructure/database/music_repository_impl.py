# 📄 File: soundcave/modules/catalog/infrastructure/database/music_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves and finds songs in the database, counts plays, and records who liked which song.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of MusicRepository. Play counts use a single atomic UPDATE;
# likes are unique rows counted with count(*).
#
# 🔗 Dependencies:
# - SQLAlchemy async session, catalog ORM models
#
# 🔄 Connected Modules / Calls From:
# - music_service.py

import logging
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.core.exceptions import ConflictError, NotFoundError

from ...domain.models.music import Music
from ...domain.repositories.music_repository import MusicRepository
from .models import MusicLikeModel, MusicModel

logger = logging.getLogger(__name__)

COPIED_FIELDS = (
    "title", "artist", "artist_id", "album", "genre", "release_date", "duration",
    "language", "explicit", "lyrics", "description", "tags", "audio_file_url",
    "cover_image_url",
)


class MusicRepositoryImpl(MusicRepository):
    """SQLAlchemy implementation of the MusicRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, music: Music) -> Music:
        model = MusicModel(
            **{field: getattr(music, field) for field in COPIED_FIELDS},
            play_count=music.play_count,
            created_at=music.created_at,
            updated_at=music.updated_at,
        )
        try:
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error during music creation: {e}")
            raise

        logger.info(f"Created music with ID: {model.id}")
        return self._model_to_domain(model, like_count=0)

    async def get_by_id(self, music_id: int) -> Optional[Music]:
        model = await self._get_active(music_id)
        if model is None:
            return None
        return self._model_to_domain(model, like_count=await self.count_likes(music_id))

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
        conditions = [MusicModel.deleted_at.is_(None)]
        if artist_id is not None:
            conditions.append(MusicModel.artist_id == artist_id)
        if genre:
            conditions.append(func.lower(MusicModel.genre).like(f"%{genre.strip().lower()}%"))
        if language:
            conditions.append(MusicModel.language == language)
        if explicit is not None:
            conditions.append(MusicModel.explicit == explicit)
        if search:
            pattern = f"%{search.strip().lower()}%"
            conditions.append(
                or_(
                    func.lower(MusicModel.title).like(pattern),
                    func.lower(MusicModel.artist).like(pattern),
                    func.lower(MusicModel.album).like(pattern),
                )
            )

        try:
            total = await self._session.scalar(
                select(func.count()).select_from(MusicModel).where(*conditions)
            )
            result = await self._session.execute(
                select(MusicModel)
                .where(*conditions)
                .order_by(MusicModel.created_at.desc(), MusicModel.id.desc())
                .offset(offset)
                .limit(limit)
            )
            models = result.scalars().all()
            like_counts = await self._count_likes_for(model.id for model in models)
        except SQLAlchemyError as e:
            logger.error(f"Database error listing musics: {e}")
            raise

        musics = [self._model_to_domain(m, like_count=like_counts.get(m.id, 0)) for m in models]
        return musics, int(total or 0)

    async def update(self, music: Music) -> Music:
        model = await self._get_active(music.id)
        if model is None:
            raise NotFoundError("Music not found", resource_type="music", resource_id=music.id)

        for field in COPIED_FIELDS:
            setattr(model, field, getattr(music, field))
        model.updated_at = datetime.now(timezone.utc)

        await self._session.flush()
        await self._session.refresh(model)
        return self._model_to_domain(model, like_count=await self.count_likes(model.id))

    async def soft_delete(self, music_id: int) -> bool:
        now = datetime.now(timezone.utc)
        result = await self._session.execute(
            update(MusicModel)
            .where(MusicModel.id == music_id, MusicModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        return result.rowcount > 0

    async def increment_play_count(self, music_id: int) -> Optional[int]:
        result = await self._session.execute(
            update(MusicModel)
            .where(MusicModel.id == music_id, MusicModel.deleted_at.is_(None))
            .values(play_count=MusicModel.play_count + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            return None
        return await self._session.scalar(
            select(MusicModel.play_count).where(MusicModel.id == music_id)
        )

    # =========================================================================
    # LIKES
    # =========================================================================

    async def add_like(self, user_id: int, music_id: int) -> None:
        existing = await self._session.scalar(
            select(MusicLikeModel.id).where(
                MusicLikeModel.user_id == user_id,
                MusicLikeModel.music_id == music_id,
            )
        )
        if existing is not None:
            raise ConflictError("You already like this music", resource_type="music_like")

        try:
            self._session.add(MusicLikeModel(user_id=user_id, music_id=music_id))
            await self._session.flush()
        except IntegrityError as e:
            await self._session.rollback()
            logger.info(f"Concurrent duplicate like by user {user_id} on music {music_id}")
            raise ConflictError("You already like this music", resource_type="music_like") from e

    async def remove_like(self, user_id: int, music_id: int) -> bool:
        result = await self._session.execute(
            delete(MusicLikeModel).where(
                MusicLikeModel.user_id == user_id,
                MusicLikeModel.music_id == music_id,
            )
        )
        return result.rowcount > 0

    async def count_likes(self, music_id: int) -> int:
        count = await self._session.scalar(
            select(func.count()).select_from(MusicLikeModel).where(MusicLikeModel.music_id == music_id)
        )
        return int(count or 0)

    async def _count_likes_for(self, music_ids: Iterable[int]) -> Dict[int, int]:
        ids = list(music_ids)
        if not ids:
            return {}
        result = await self._session.execute(
            select(MusicLikeModel.music_id, func.count())
            .where(MusicLikeModel.music_id.in_(ids))
            .group_by(MusicLikeModel.music_id)
        )
        return {music_id: count for music_id, count in result.all()}

    async def _get_active(self, music_id: int) -> Optional[MusicModel]:
        result = await self._session.execute(
            select(MusicModel).where(MusicModel.id == music_id, MusicModel.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    def _model_to_domain(self, model: MusicModel, like_count: int) -> Music:
        return Music(
            id=model.id,
            **{field: getattr(model, field) for field in COPIED_FIELDS},
            play_count=model.play_count or 0,
            like_count=like_count,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

# 📄 File: soundcave/modules/catalog/infrastructure/database/album_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds, lists, edits and removes album releases in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of AlbumRepository with domain mapping, filtering and
# pagination.
#
# 🔗 Dependencies:
# - SQLAlchemy async session, catalog ORM models
#
# 🔄 Connected Modules / Calls From:
# - album_service.py

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.core.exceptions import NotFoundError

from ...domain.models.album import Album, AlbumType
from ...domain.repositories.album_repository import AlbumRepository
from .models import AlbumModel

logger = logging.getLogger(__name__)

COPIED_FIELDS = (
    "title", "artist_id", "artist", "release_date", "genre", "total_tracks",
    "record_label", "image",
)


class AlbumRepositoryImpl(AlbumRepository):
    """SQLAlchemy implementation of the AlbumRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, album: Album) -> Album:
        model = AlbumModel(
            **{field: getattr(album, field) for field in COPIED_FIELDS},
            album_type=album.album_type.value,
            created_at=album.created_at,
            updated_at=album.updated_at,
        )
        try:
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error during album creation: {e}")
            raise

        logger.info(f"Created album with ID: {model.id}")
        return self._model_to_domain(model)

    async def get_by_id(self, album_id: int) -> Optional[Album]:
        model = await self._get_active(album_id)
        return self._model_to_domain(model) if model else None

    async def list_albums(
        self,
        offset: int = 0,
        limit: int = 10,
        artist_id: Optional[int] = None,
        album_type: Optional[AlbumType] = None,
        genre: Optional[str] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Album], int]:
        conditions = [AlbumModel.deleted_at.is_(None)]
        if artist_id is not None:
            conditions.append(AlbumModel.artist_id == artist_id)
        if album_type is not None:
            conditions.append(AlbumModel.album_type == album_type.value)
        if genre:
            conditions.append(func.lower(AlbumModel.genre).like(f"%{genre.strip().lower()}%"))
        if search:
            pattern = f"%{search.strip().lower()}%"
            conditions.append(
                or_(
                    func.lower(AlbumModel.title).like(pattern),
                    func.lower(AlbumModel.artist).like(pattern),
                )
            )

        try:
            total = await self._session.scalar(
                select(func.count()).select_from(AlbumModel).where(*conditions)
            )
            result = await self._session.execute(
                select(AlbumModel)
                .where(*conditions)
                .order_by(AlbumModel.release_date.desc(), AlbumModel.id.desc())
                .offset(offset)
                .limit(limit)
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error listing albums: {e}")
            raise

        return [self._model_to_domain(m) for m in result.scalars().all()], int(total or 0)

    async def update(self, album: Album) -> Album:
        model = await self._get_active(album.id)
        if model is None:
            raise NotFoundError("Album not found", resource_type="album", resource_id=album.id)

        for field in COPIED_FIELDS:
            setattr(model, field, getattr(album, field))
        model.album_type = album.album_type.value
        model.updated_at = datetime.now(timezone.utc)

        await self._session.flush()
        await self._session.refresh(model)
        return self._model_to_domain(model)

    async def soft_delete(self, album_id: int) -> bool:
        now = datetime.now(timezone.utc)
        result = await self._session.execute(
            update(AlbumModel)
            .where(AlbumModel.id == album_id, AlbumModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        return result.rowcount > 0

    async def _get_active(self, album_id: int) -> Optional[AlbumModel]:
        result = await self._session.execute(
            select(AlbumModel).where(AlbumModel.id == album_id, AlbumModel.deleted_at.is_(None))
        )
        return result.scalar_one_or_none()

    def _model_to_domain(self, model: AlbumModel) -> Album:
        return Album(
            id=model.id,
            **{field: getattr(model, field) for field in COPIED_FIELDS},
            album_type=AlbumType(model.album_type),
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

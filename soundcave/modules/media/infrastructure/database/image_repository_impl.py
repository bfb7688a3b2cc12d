"""
SQLAlchemy implementation of the ImageRepository interface.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...domain.models.image import Image
from ...domain.repositories.image_repository import ImageRepository
from .models import ImageModel

logger = logging.getLogger(__name__)


class ImageRepositoryImpl(ImageRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, image: Image) -> Image:
        model = ImageModel(
            file_name=image.file_name,
            file_url=image.file_url,
            file_size=image.file_size,
            content_type=image.content_type,
            bucket_path=image.bucket_path,
            created_at=image.created_at,
            updated_at=image.updated_at,
        )
        try:
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        except SQLAlchemyError as e:
            logger.error(f"Database error recording image {image.bucket_path}: {e}")
            raise
        return self._model_to_domain(model)

    async def get_by_id(self, image_id: int) -> Optional[Image]:
        result = await self._session.execute(
            select(ImageModel).where(ImageModel.id == image_id, ImageModel.deleted_at.is_(None))
        )
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def list_images(self, offset: int = 0, limit: int = 10) -> Tuple[List[Image], int]:
        active = ImageModel.deleted_at.is_(None)
        total = await self._session.scalar(select(func.count()).select_from(ImageModel).where(active))
        result = await self._session.execute(
            select(ImageModel)
            .where(active)
            .order_by(ImageModel.created_at.desc(), ImageModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        return [self._model_to_domain(m) for m in result.scalars().all()], int(total or 0)

    async def soft_delete(self, image_id: int) -> bool:
        now = datetime.now(timezone.utc)
        result = await self._session.execute(
            update(ImageModel)
            .where(ImageModel.id == image_id, ImageModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        return result.rowcount > 0

    def _model_to_domain(self, model: ImageModel) -> Image:
        return Image(
            id=model.id,
            file_name=model.file_name,
            file_url=model.file_url,
            file_size=model.file_size,
            content_type=model.content_type,
            bucket_path=model.bucket_path,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

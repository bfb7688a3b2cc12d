"""
Dependency providers for upload endpoints.

Upload operations take the storage client from ``get_storage_client`` and
fail when storage is not configured; listing and deletion work without it.
"""

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.config.database import get_db
from soundcave.shared.core.dependencies import get_optional_storage_client, get_storage_client
from soundcave.shared.infrastructure.storage.supabase_storage import ObjectStorage

from ..domain.services.media_service import MediaService
from ..infrastructure.database.image_repository_impl import ImageRepositoryImpl


def get_upload_service(
    request: Request,
    db: AsyncSession = Depends(get_db),
    storage: ObjectStorage = Depends(get_storage_client),
) -> MediaService:
    return MediaService(db, ImageRepositoryImpl(db), storage=storage, settings=request.app.state.settings)


def get_media_service(
    request: Request,
    db: AsyncSession = Depends(get_db),
    storage: Optional[ObjectStorage] = Depends(get_optional_storage_client),
) -> MediaService:
    return MediaService(db, ImageRepositoryImpl(db), storage=storage, settings=request.app.state.settings)

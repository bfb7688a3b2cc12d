# 📄 File: soundcave/modules/media/presentation/api/v1/images.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for uploading pictures, listing uploaded pictures and removing them.
#
# 🧪 Purpose (Technical Summary):
# FastAPI multipart image upload (single and batch), listing and admin deletion endpoints.
#
# 🔗 Dependencies:
# - FastAPI UploadFile/Form (python-multipart)
# - soundcave.modules.media.domain.services.media_service
#
# 🔄 Connected Modules / Calls From:
# - soundcave.api.v1.router (router inclusion)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Path, UploadFile, status

from soundcave.shared.core.dependencies import (
    PaginationParams,
    get_current_identity,
    get_pagination_params,
    require_role,
)
from soundcave.shared.core.roles import Role
from soundcave.shared.core.security import Identity
from soundcave.shared.utils.responses import MessageResponse

from ...dependencies import get_media_service, get_upload_service
from ....domain.services.media_service import MediaService
from ..schemas.image_schemas import (
    ImageDataResponse,
    ImageListResponse,
    ImageResponse,
    ImageUploadFailure,
    MultipleImageUploadResponse,
)

logger = logging.getLogger(__name__)

images_router = APIRouter(prefix="/images", tags=["Images"])


@images_router.post(
    "/upload",
    response_model=ImageDataResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload image",
    description="Upload a JPEG, PNG, GIF or WEBP image (max 10MB)",
    responses={
        201: {"description": "Image uploaded"},
        400: {"description": "Invalid file type or content"},
        401: {"description": "Not authenticated"},
        413: {"description": "File too large"},
        503: {"description": "Storage unavailable"},
    }
)
async def upload_image(
    file: UploadFile = File(..., description="Image file"),
    folder: Optional[str] = Form(None, description="Destination folder (default: images)"),
    identity: Identity = Depends(get_current_identity),
    media_service: MediaService = Depends(get_upload_service),
) -> ImageDataResponse:
    data = await file.read()
    image = await media_service.upload_image(
        data,
        filename=file.filename or "upload",
        content_type=file.content_type,
        folder=folder,
    )
    logger.info(f"User {identity.id} uploaded image {image.id}")
    return ImageDataResponse(message="Image uploaded successfully", data=ImageResponse.from_domain(image))


@images_router.post(
    "/upload-multiple",
    response_model=MultipleImageUploadResponse,
    summary="Upload several images",
    description="Upload several images into one folder; rejected files are listed in errors",
    responses={
        200: {"description": "Batch processed"},
        401: {"description": "Not authenticated"},
        422: {"description": "Invalid folder"},
        503: {"description": "Storage unavailable"},
    }
)
async def upload_images(
    file: List[UploadFile] = File(..., description="Image files"),
    folder: Optional[str] = Form(None, description="Destination folder (default: images)"),
    identity: Identity = Depends(get_current_identity),
    media_service: MediaService = Depends(get_upload_service),
) -> MultipleImageUploadResponse:
    batch = [(await upload.read(), upload.filename or "upload", upload.content_type) for upload in file]
    images, failed = await media_service.upload_images(batch, folder=folder)
    logger.info(f"User {identity.id} uploaded {len(images)} of {len(batch)} images")
    return MultipleImageUploadResponse(
        message=f"{len(images)} of {len(batch)} images uploaded",
        data=[ImageResponse.from_domain(image) for image in images],
        errors=[ImageUploadFailure(**failure) for failure in failed],
    )


@images_router.get(
    "",
    response_model=ImageListResponse,
    summary="List images",
)
async def list_images(
    pagination: PaginationParams = Depends(get_pagination_params),
    identity: Identity = Depends(get_current_identity),
    media_service: MediaService = Depends(get_media_service),
) -> ImageListResponse:
    images, total = await media_service.list_images(offset=pagination.offset, limit=pagination.limit)
    return ImageListResponse(
        data=[ImageResponse.from_domain(image) for image in images],
        pagination=pagination.meta(total),
    )


@images_router.delete(
    "/{image_id}",
    response_model=MessageResponse,
    summary="Delete image (admin)",
    responses={
        200: {"description": "Image deleted"},
        403: {"description": "Admin role required"},
        404: {"description": "Image not found"},
    }
)
async def delete_image(
    image_id: int = Path(..., ge=1),
    admin: Identity = Depends(require_role(Role.ADMIN)),
    media_service: MediaService = Depends(get_media_service),
) -> MessageResponse:
    await media_service.delete_image(image_id)
    return MessageResponse(message="Image deleted successfully")

"""
Image API Schemas
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from soundcave.shared.utils.responses import PaginationMeta

from ....domain.models.image import Image


class ImageResponse(BaseModel):
    id: int
    file_name: str
    file_url: str
    file_size: int
    content_type: str
    bucket_path: str
    created_at: datetime

    @classmethod
    def from_domain(cls, image: Image) -> "ImageResponse":
        return cls(**image.model_dump(exclude={"updated_at", "deleted_at"}))


class ImageDataResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: ImageResponse


class ImageListResponse(BaseModel):
    success: bool = True
    data: List[ImageResponse]
    pagination: PaginationMeta


class ImageUploadFailure(BaseModel):
    file_name: str
    code: str
    message: str


class MultipleImageUploadResponse(BaseModel):
    success: bool = True
    message: str
    data: List[ImageResponse]
    errors: List[ImageUploadFailure] = Field(default_factory=list)

# 📄 File: soundcave/modules/media/domain/services/media_service.py
# 🧭 Purpose (Layman Explanation):
# Checks uploaded pictures and songs (right type, not too big, not corrupted), stores
# them online, and keeps a record of uploaded pictures.
# 🧪 Purpose (Technical Summary):
# Upload service validating size, MIME type and (for images) content with Pillow, then
# writing through the injected ObjectStorage client and recording image metadata.
# 🔗 Dependencies:
# - PIL (Pillow): Image integrity verification
# - soundcave.shared.infrastructure.storage (ObjectStorage)
# - ImageRepository
# 🔄 Connected Modules / Calls From:
# Images API endpoints, music audio upload endpoint

import io
import logging
from typing import Any, Dict, List, Optional, Tuple

from PIL import Image as PILImage
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.config.settings import Settings, get_settings
from soundcave.shared.core.exceptions import (
    FileStorageError,
    FileTooLargeError,
    InvalidFileTypeError,
    NotFoundError,
    ValidationError,
)
from soundcave.shared.infrastructure.storage.supabase_storage import ObjectStorage, build_object_path

from ..models.image import Image
from ..repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": "JPEG",
    "image/jpg": "JPEG",
    "image/png": "PNG",
    "image/gif": "GIF",
    "image/webp": "WEBP",
}

ALLOWED_AUDIO_TYPES = frozenset({
    "audio/mpeg", "audio/mp3",
    "audio/wav", "audio/wave", "audio/x-wav",
    "audio/ogg", "audio/vorbis",
    "audio/mp4", "audio/m4a", "audio/aac",
    "audio/flac", "audio/x-flac",
})

DEFAULT_IMAGE_FOLDER = "images"
DEFAULT_AUDIO_FOLDER = "musics"


def normalize_folder(folder: Optional[str], default: str) -> str:
    """Strip slashes and reject parent-directory segments."""
    folder = (folder or "").strip().strip("/")
    if not folder:
        return default
    if any(part in ("", ".", "..") for part in folder.split("/")):
        raise ValidationError("Invalid folder", field="folder", value=folder)
    return folder


class MediaService:
    """
    Upload handling for images and audio.

    Images are recorded in the ``images`` table; audio uploads only return
    the stored object's URL, which clients then attach to a music record.
    """

    def __init__(
        self,
        session: AsyncSession,
        image_repository: ImageRepository,
        storage: Optional[ObjectStorage] = None,
        settings: Optional[Settings] = None
    ):
        self._session = session
        self.image_repository = image_repository
        self.storage = storage
        self.settings = settings or get_settings()

    # =========================================================================
    # IMAGES
    # =========================================================================

    async def upload_image(
        self,
        data: bytes,
        filename: str,
        content_type: Optional[str],
        folder: Optional[str] = None
    ) -> Image:
        """
        Validate and store an image, then record it.

        Raises:
            FileTooLargeError: Above MAX_IMAGE_SIZE
            InvalidFileTypeError: Disallowed MIME type or unreadable image
            FileStorageError: Storage unavailable or upload failed
        """
        content_type = (content_type or "").lower()
        self._check_size(data, self.settings.MAX_IMAGE_SIZE)
        if content_type not in ALLOWED_IMAGE_TYPES:
            raise InvalidFileTypeError(
                "Only JPEG, PNG, GIF and WEBP images are allowed",
                content_type=content_type,
                allowed_types=list(ALLOWED_IMAGE_TYPES),
            )
        self._verify_image(data, content_type)

        path = build_object_path(normalize_folder(folder, DEFAULT_IMAGE_FOLDER), filename, default_ext=".jpg")
        storage = self._require_storage()
        stored = await storage.upload_file(data, path, content_type)

        try:
            image = await self.image_repository.create(
                Image(
                    file_name=filename,
                    file_url=stored["public_url"],
                    file_size=stored["file_size"],
                    content_type=content_type,
                    bucket_path=stored["path"],
                )
            )
            await self._session.commit()
        except Exception:
            # Every stored image object has a record
            logger.error(f"Recording image {stored['path']} failed; removing the stored object")
            await storage.delete_file(stored["path"])
            raise

        logger.info(f"Image uploaded: {image.bucket_path} ({image.file_size} bytes)")
        return image

    async def upload_images(
        self,
        files: List[Tuple[bytes, str, Optional[str]]],
        folder: Optional[str] = None
    ) -> Tuple[List[Image], List[Dict[str, str]]]:
        """
        Upload several images into one folder.

        A file rejected for its size, type or content is reported and the
        remaining files are still uploaded.

        Args:
            files: ``(data, filename, content_type)`` per file
            folder: Destination folder for every file

        Returns:
            (uploaded images, failures with file_name, code and message)

        Raises:
            ValidationError: If the folder is invalid
            FileStorageError: Storage unavailable or upload failed
        """
        folder = normalize_folder(folder, DEFAULT_IMAGE_FOLDER)
        uploaded: List[Image] = []
        failed: List[Dict[str, str]] = []

        for data, filename, content_type in files:
            try:
                uploaded.append(await self.upload_image(data, filename, content_type, folder=folder))
            except (ValidationError, FileTooLargeError, InvalidFileTypeError) as e:
                logger.info(f"Image {filename} rejected: {e.message}")
                failed.append({"file_name": filename, "code": e.error_code, "message": e.message})

        return uploaded, failed

    async def list_images(self, offset: int, limit: int) -> Tuple[List[Image], int]:
        return await self.image_repository.list_images(offset=offset, limit=limit)

    async def delete_image(self, image_id: int) -> None:
        """
        Soft delete the record and remove the object from storage.

        A storage failure is logged and does not block the deletion.
        """
        image = await self.image_repository.get_by_id(image_id)
        if image is None:
            raise NotFoundError("Image not found", resource_type="image", resource_id=image_id)

        if self.storage is not None:
            if not await self.storage.delete_file(image.bucket_path):
                logger.warning(f"Object {image.bucket_path} could not be removed from storage")

        await self.image_repository.soft_delete(image_id)
        await self._session.commit()

    # =========================================================================
    # AUDIO
    # =========================================================================

    async def upload_audio(
        self,
        data: bytes,
        filename: str,
        content_type: Optional[str],
        folder: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Validate and store an audio file.

        Returns:
            dict with file_name, file_url, file_size, content_type, bucket_path
        """
        content_type = (content_type or "").lower()
        self._check_size(data, self.settings.MAX_AUDIO_SIZE)
        if content_type not in ALLOWED_AUDIO_TYPES:
            raise InvalidFileTypeError(
                "Only MP3, WAV, OGG, M4A, AAC and FLAC audio is allowed",
                content_type=content_type,
                allowed_types=list(ALLOWED_AUDIO_TYPES),
            )

        path = build_object_path(normalize_folder(folder, DEFAULT_AUDIO_FOLDER), filename, default_ext=".mp3")
        stored = await self._require_storage().upload_file(data, path, content_type)
        logger.info(f"Audio uploaded: {stored['path']} ({stored['file_size']} bytes)")
        return {
            "file_name": filename,
            "file_url": stored["public_url"],
            "file_size": stored["file_size"],
            "content_type": content_type,
            "bucket_path": stored["path"],
        }

    # =========================================================================
    # VALIDATION
    # =========================================================================

    def _check_size(self, data: bytes, max_size: int) -> None:
        if not data:
            raise ValidationError("Uploaded file is empty", field="file")
        if len(data) > max_size:
            raise FileTooLargeError(
                f"File size {len(data)} exceeds maximum {max_size} bytes",
                file_size=len(data),
                max_size=max_size,
            )

    def _verify_image(self, data: bytes, content_type: str) -> None:
        """Check the bytes decode as an image of the declared format."""
        try:
            with PILImage.open(io.BytesIO(data)) as img:
                detected = img.format
                img.verify()
        except Exception as e:
            raise InvalidFileTypeError(f"Invalid image file: {e}", content_type=content_type) from e

        if detected != ALLOWED_IMAGE_TYPES[content_type]:
            raise InvalidFileTypeError(
                f"File content is {detected}, not {content_type}",
                content_type=content_type,
            )

    def _require_storage(self) -> ObjectStorage:
        if self.storage is None:
            raise FileStorageError("Object storage is not configured", operation="upload")
        return self.storage

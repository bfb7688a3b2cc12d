# 📄 File: soundcave/shared/infrastructure/storage/supabase_storage.py

# 🧭 Purpose (Layman Explanation):
# Uploads cover art, profile pictures and audio tracks to cloud storage and hands back
# a public link, organizing files into folders with unique names.

# 🧪 Purpose (Technical Summary):
# Object storage contract plus a Supabase Storage implementation. The client is
# constructed and initialized by the application lifespan, kept on app.state, and
# injected into operations through a FastAPI dependency.

# 🔗 Dependencies:
# - supabase: Storage client
# - asyncio: Offloading the synchronous SDK calls to worker threads
# - soundcave.shared.config.settings

# 🔄 Connected Modules / Calls From:
# Called by: soundcave.main (lifespan), soundcave.shared.core.dependencies (get_storage_client),
# media service (image and audio uploads)

import asyncio
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from supabase import Client, create_client

from soundcave.shared.config.settings import Settings
from soundcave.shared.core.exceptions import FileStorageError

logger = logging.getLogger(__name__)


def build_object_path(folder: str, filename: str, default_ext: str = "") -> str:
    """
    Generate a unique object path inside ``folder`` keeping the file extension.

    Args:
        folder: Destination folder, e.g. "images" or "musics/audio"
        filename: Original client-side filename
        default_ext: Extension used when the filename has none

    Returns:
        str: Path such as "images/20250101_120000_ab12cd34.png"
    """
    folder = folder.strip("/") or "uploads"
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    file_ext = Path(filename).suffix.lower() or default_ext
    return f"{folder}/{timestamp}_{uuid4().hex[:8]}{file_ext}"


class ObjectStorage(ABC):
    """Minimal object store contract used by upload operations."""

    @abstractmethod
    async def upload_file(self, data: bytes, path: str, content_type: str) -> Dict[str, Any]:
        """Store ``data`` at ``path`` and return {"path", "public_url", "file_size"}."""

    @abstractmethod
    async def delete_file(self, path: str) -> bool:
        """Remove the object at ``path``; False when the store reports failure."""

    @abstractmethod
    async def get_public_url(self, path: str) -> str:
        """Public URL for an object already in the store."""

    async def close(self) -> None:
        """Release client resources."""


class SupabaseStorageClient(ObjectStorage):
    """
    Supabase Storage implementation of ObjectStorage.

    The supabase SDK is synchronous, so calls run in worker threads.
    """

    def __init__(self, settings: Settings):
        self.supabase_url = settings.SUPABASE_URL
        self.supabase_key = settings.SUPABASE_SERVICE_ROLE_KEY
        self.bucket_name = settings.SUPABASE_STORAGE_BUCKET
        self.client: Optional[Client] = None

    async def initialize(self) -> None:
        """Create the Supabase client."""
        try:
            self.client = await asyncio.to_thread(create_client, self.supabase_url, self.supabase_key)
            logger.info(f"Supabase Storage client initialized for bucket: {self.bucket_name}")
        except Exception as e:
            logger.error(f"Failed to initialize Supabase Storage: {e}")
            raise FileStorageError("Storage initialization failed", operation="initialize") from e

    def _bucket(self):
        if self.client is None:
            raise FileStorageError("Storage client is not initialized", operation="bucket")
        return self.client.storage.from_(self.bucket_name)

    async def upload_file(self, data: bytes, path: str, content_type: str) -> Dict[str, Any]:
        bucket = self._bucket()
        try:
            await asyncio.to_thread(
                bucket.upload,
                path=path,
                file=data,
                file_options={
                    "content-type": content_type,
                    "cache-control": "31536000",
                    "upsert": "false",
                },
            )
            public_url = await asyncio.to_thread(bucket.get_public_url, path)
        except FileStorageError:
            raise
        except Exception as e:
            logger.error(f"File upload failed for {path}: {e}")
            raise FileStorageError("Upload failed", operation="upload", file_path=path) from e

        logger.info(f"File uploaded successfully: {path}")
        return {"path": path, "public_url": public_url, "file_size": len(data)}

    async def delete_file(self, path: str) -> bool:
        bucket = self._bucket()
        try:
            await asyncio.to_thread(bucket.remove, [path])
        except Exception as e:
            logger.error(f"File deletion failed for {path}: {e}")
            return False
        logger.info(f"File deleted successfully: {path}")
        return True

    async def get_public_url(self, path: str) -> str:
        bucket = self._bucket()
        try:
            return await asyncio.to_thread(bucket.get_public_url, path)
        except Exception as e:
            logger.error(f"Public URL lookup failed for {path}: {e}")
            raise FileStorageError("Public URL lookup failed", operation="get_public_url", file_path=path) from e

    async def close(self) -> None:
        self.client = None

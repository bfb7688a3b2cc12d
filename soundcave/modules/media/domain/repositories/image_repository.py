# 📄 File: soundcave/modules/media/domain/repositories/image_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how uploaded picture records are saved, listed and removed.
# 🧪 Purpose (Technical Summary):
# Repository interface for Image records.
# 🔗 Dependencies:
# Domain models (Image), typing, abc
# 🔄 Connected Modules / Calls From:
# media_service.py, infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from ..models.image import Image


class ImageRepository(ABC):
    """Repository interface for image records. Soft-deleted rows are hidden."""

    @abstractmethod
    async def create(self, image: Image) -> Image:
        pass

    @abstractmethod
    async def get_by_id(self, image_id: int) -> Optional[Image]:
        pass

    @abstractmethod
    async def list_images(self, offset: int = 0, limit: int = 10) -> Tuple[List[Image], int]:
        pass

    @abstractmethod
    async def soft_delete(self, image_id: int) -> bool:
        pass

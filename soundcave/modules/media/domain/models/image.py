# 📄 File: soundcave/modules/media/domain/models/image.py
# 🧭 Purpose (Layman Explanation):
# Describes an uploaded picture: its name, where it lives online, its size and type.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for stored image records.
# 🔗 Dependencies:
# pydantic, datetime
# 🔄 Connected Modules / Calls From:
# media_service.py, image_repository.py

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


class Image(BaseModel):
    """Uploaded image record. ``bucket_path`` is the object key in storage."""
    id: Optional[int] = None
    file_name: str
    file_url: str
    file_size: int
    content_type: str
    bucket_path: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

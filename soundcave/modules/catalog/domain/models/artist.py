# 📄 File: soundcave/modules/catalog/domain/models/artist.py
# 🧭 Purpose (Layman Explanation):
# Describes an artist page in SoundCave: name, biography, where they come from, how to
# reach them, and which account (if any) runs the page.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for Artist records, including the optional link to the
# identity that manages the artist.
# 🔗 Dependencies:
# pydantic, datetime
# 🔄 Connected Modules / Calls From:
# artist_service.py, artist_repository.py, follow_service.py

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Artist(BaseModel):
    """
    Artist domain model.

    ``ref_user_id`` links the record to the identity that manages it; that
    identity cannot follow its own artist page.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    ref_user_id: Optional[int] = None
    name: str
    bio: str = ""
    genre: Optional[str] = None
    country: Optional[str] = None
    debut_year: Optional[str] = None
    website: Optional[str] = None
    email: str
    phone: Optional[str] = None
    social_media: Dict[str, Any] = Field(default_factory=dict)
    profile_image: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def is_managed_by(self, user_id: int) -> bool:
        return self.ref_user_id is not None and self.ref_user_id == user_id

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

# 📄 File: soundcave/modules/user_management/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what an account is in SoundCave: who the person is, how to contact them,
# what kind of account they hold (listener, artist, label...) and whether it was removed.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for the Identity entity with role typing, soft-delete state,
# and the business predicates used by authentication and the follow service.
# 🔗 Dependencies:
# pydantic, datetime, soundcave.shared.core.roles
# 🔄 Connected Modules / Calls From:
# auth_service.py, user_service.py, user_repository.py, follow_service.py

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from soundcave.shared.core.roles import FOLLOWABLE_ROLES, Role, parse_role


class User(BaseModel):
    """
    Identity domain model.

    ``password_hash`` is None for accounts created through Google sign-in.
    ``deleted_at`` marks a soft-deleted account; such accounts are hidden
    from lookups and cannot sign in.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[int] = None
    full_name: str
    email: str
    password_hash: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    role: Role = Role.USER

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deleted_at: Optional[datetime] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, v):
        return parse_role(v)

    # Business predicates

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def has_password(self) -> bool:
        return bool(self.password_hash)

    @property
    def is_followable(self) -> bool:
        """Independent artists and labels accept followers."""
        return self.role in FOLLOWABLE_ROLES

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

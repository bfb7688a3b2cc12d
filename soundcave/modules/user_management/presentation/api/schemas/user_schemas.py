# 📄 File: soundcave/modules/user_management/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines what account data the API accepts when admins create or people edit accounts,
# and what account data it shows back (never the password).
#
# 🧪 Purpose (Technical Summary):
# Pydantic schemas for user CRUD endpoints, mapping from the User domain model while
# filtering security-sensitive fields.
#
# 🔗 Dependencies:
# - pydantic, soundcave.modules.user_management.domain.models.user
#
# 🔄 Connected Modules / Calls From:
# - users.py and auth.py endpoints

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from soundcave.shared.core.roles import Role
from soundcave.shared.utils.responses import PaginationMeta

from ....domain.models.user import User


class UserCreateRequest(BaseModel):
    """Admin-created account. Role must be user, admin or premium."""

    full_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    role: str = Field("user", description="user, admin or premium")
    phone: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=2000)
    profile_image: Optional[str] = Field(None, max_length=500)


class UserUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6, max_length=128)
    role: Optional[str] = Field(None, description="Admin only")
    phone: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=2000)
    profile_image: Optional[str] = Field(None, max_length=500)


class UserResponse(BaseModel):
    """Public account representation."""

    id: int
    full_name: str
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    profile_image: Optional[str] = None
    role: Role
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            full_name=user.full_name,
            email=user.email,
            phone=user.phone,
            location=user.location,
            bio=user.bio,
            profile_image=user.profile_image,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserListResponse(BaseModel):
    success: bool = True
    data: List[UserResponse]
    pagination: PaginationMeta


class UserDataResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: UserResponse

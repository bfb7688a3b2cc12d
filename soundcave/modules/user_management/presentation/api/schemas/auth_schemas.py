# 📄 File: soundcave/modules/user_management/presentation/api/schemas/auth_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the shape of sign-up, login and Google sign-in requests, and of the
# answers the API sends back with the account and its access token.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the authentication endpoints with validation
# and OpenAPI examples.
#
# 🔗 Dependencies:
# - pydantic (EmailStr via email-validator)
#
# 🔄 Connected Modules / Calls From:
# - soundcave.modules.user_management.presentation.api.v1.auth

"""
Authentication API Schemas

Request Schemas:
- RegisterRequest: Listener self-registration
- LoginRequest: Email/password credentials
- GoogleSignInRequest: Google ID token

Response Schemas:
- AuthResponse: Account summary with a bearer token
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from .user_schemas import UserResponse


class RegisterRequest(BaseModel):
    """Self-registration payload. The account role is always ``user``."""

    full_name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=6, max_length=128, description="Password (min 6 characters)")
    phone: Optional[str] = Field(None, max_length=50)
    location: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=2000)

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Full name cannot be blank")
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "full_name": "Ayu Lestari",
                "email": "ayu@example.com",
                "password": "secret123",
                "location": "Jakarta",
            }
        }
    }


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., description="Email address")
    password: str = Field(..., min_length=1, description="Password")


class GoogleSignInRequest(BaseModel):
    id_token: str = Field(..., min_length=1, description="ID token from Google Sign-In")


class AuthResponse(BaseModel):
    """Successful authentication."""

    success: bool = True
    message: str
    token: str = Field(..., description="Bearer access token")
    token_type: str = "bearer"
    user: UserResponse

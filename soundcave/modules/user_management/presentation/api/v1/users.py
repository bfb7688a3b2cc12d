# 📄 File: soundcave/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for managing accounts: admins create, list and remove accounts, and
# signed-in people can view accounts and edit their own.
#
# 🧪 Purpose (Technical Summary):
# FastAPI user CRUD endpoints guarded by the access control dependencies, with
# pagination and filtering on the listing.
#
# 🔗 Dependencies:
# - FastAPI router, soundcave.shared.core.dependencies (guard, pagination)
# - soundcave.modules.user_management.domain.services.user_service
#
# 🔄 Connected Modules / Calls From:
# - soundcave.api.v1.router (router inclusion)

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status

from soundcave.shared.core.dependencies import (
    PaginationParams,
    get_current_identity,
    get_pagination_params,
    require_role,
)
from soundcave.shared.core.roles import Role
from soundcave.shared.core.security import Identity
from soundcave.shared.utils.responses import MessageResponse

from ...dependencies import get_user_service
from ....domain.services.user_service import UserService
from ..schemas.user_schemas import (
    UserCreateRequest,
    UserDataResponse,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

logger = logging.getLogger(__name__)

users_router = APIRouter(prefix="/users", tags=["Users"])


@users_router.post(
    "",
    response_model=UserDataResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user (admin)",
    description="Create an account with role user, admin or premium",
    responses={
        201: {"description": "User created"},
        401: {"description": "Not authenticated"},
        403: {"description": "Admin role required"},
        409: {"description": "Email already registered"},
        422: {"description": "Validation error or role not assignable"},
    }
)
async def create_user(
    payload: UserCreateRequest,
    admin: Identity = Depends(require_role(Role.ADMIN)),
    user_service: UserService = Depends(get_user_service),
) -> UserDataResponse:
    user = await user_service.create_user(**payload.model_dump())
    return UserDataResponse(message="User created successfully", data=UserResponse.from_domain(user))


@users_router.get(
    "",
    response_model=UserListResponse,
    summary="List users (admin)",
    responses={
        200: {"description": "Page of users"},
        401: {"description": "Not authenticated"},
        403: {"description": "Admin role required"},
    }
)
async def list_users(
    role: Optional[str] = Query(None, description="Filter by role"),
    search: Optional[str] = Query(None, max_length=100, description="Search name or email"),
    pagination: PaginationParams = Depends(get_pagination_params),
    admin: Identity = Depends(require_role(Role.ADMIN)),
    user_service: UserService = Depends(get_user_service),
) -> UserListResponse:
    users, total = await user_service.list_users(
        offset=pagination.offset, limit=pagination.limit, role=role, search=search
    )
    return UserListResponse(
        data=[UserResponse.from_domain(user) for user in users],
        pagination=pagination.meta(total),
    )


@users_router.get(
    "/{user_id}",
    response_model=UserDataResponse,
    summary="Get user by ID",
    responses={
        200: {"description": "User found"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    }
)
async def get_user(
    user_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
) -> UserDataResponse:
    user = await user_service.get_user(user_id)
    return UserDataResponse(data=UserResponse.from_domain(user))


@users_router.put(
    "/{user_id}",
    response_model=UserDataResponse,
    summary="Update user",
    description="Admins may update any account; others only their own. Role changes are admin only.",
    responses={
        200: {"description": "User updated"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not the owner or not an admin"},
        404: {"description": "User not found"},
        409: {"description": "Email already registered"},
    }
)
async def update_user(
    payload: UserUpdateRequest,
    user_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    user_service: UserService = Depends(get_user_service),
) -> UserDataResponse:
    user = await user_service.update_user(identity, user_id, payload.model_dump(exclude_unset=True))
    return UserDataResponse(message="User updated successfully", data=UserResponse.from_domain(user))


@users_router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete user (admin)",
    responses={
        200: {"description": "User deleted"},
        403: {"description": "Admin role required"},
        404: {"description": "User not found"},
    }
)
async def delete_user(
    user_id: int = Path(..., ge=1),
    admin: Identity = Depends(require_role(Role.ADMIN)),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await user_service.delete_user(user_id)
    logger.info(f"User {user_id} deleted by admin {admin.id}")
    return MessageResponse(message="User deleted successfully")

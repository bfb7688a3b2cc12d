# 📄 File: soundcave/modules/social/presentation/api/v1/follows.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints for following and unfollowing independent artists, labels and artist
# pages, and for seeing how many followers they have.
#
# 🧪 Purpose (Technical Summary):
# FastAPI follow endpoints. The access control guard resolves the caller; the
# FollowService enforces role and relationship rules.
#
# 🔗 Dependencies:
# - FastAPI router, soundcave.shared.core.dependencies (guard)
# - soundcave.modules.social.domain.services.follow_service
#
# 🔄 Connected Modules / Calls From:
# - soundcave.api.v1.router (router inclusion)

"""
Follow API Endpoints

Endpoints:
- POST /users/follow, /users/unfollow: Follow an independent artist or label account
- GET /users/{id}/followers/count
- POST /artists/{id}/follow, /artists/{id}/unfollow: Follow an artist page
- GET /artists/{id}/followers/count
"""

from fastapi import APIRouter, Depends, Path

from soundcave.shared.core.dependencies import get_current_identity
from soundcave.shared.core.security import Identity

from ...dependencies import get_follow_service
from ....domain.models.follow import FollowTargetType
from ....domain.services.follow_service import FollowService
from ..schemas.follow_schemas import (
    ArtistFollowData,
    ArtistFollowResponse,
    FollowUserRequest,
    UserFollowData,
    UserFollowResponse,
)

user_follows_router = APIRouter(prefix="/users", tags=["Follows"])
artist_follows_router = APIRouter(prefix="/artists", tags=["Follows"])

FOLLOW_RESPONSES = {
    401: {"description": "Not authenticated"},
    403: {"description": "Only listener accounts can follow"},
    404: {"description": "Target not found"},
}


# =============================================================================
# USER TARGETS
# =============================================================================

@user_follows_router.post(
    "/follow",
    response_model=UserFollowResponse,
    summary="Follow an independent artist or label",
    responses={
        200: {"description": "Now following"},
        409: {"description": "Already following, or self-follow"},
        422: {"description": "Target account cannot be followed"},
        **FOLLOW_RESPONSES,
    }
)
async def follow_user(
    payload: FollowUserRequest,
    identity: Identity = Depends(get_current_identity),
    follow_service: FollowService = Depends(get_follow_service),
) -> UserFollowResponse:
    result = await follow_service.follow(identity, FollowTargetType.USER, payload.target_user_id)
    return UserFollowResponse(
        message=f"You are now following {result.target_name}",
        data=UserFollowData.from_result(result),
    )


@user_follows_router.post(
    "/unfollow",
    response_model=UserFollowResponse,
    summary="Unfollow an independent artist or label",
    responses={
        200: {"description": "No longer following"},
        400: {"description": "Not following this account"},
        **FOLLOW_RESPONSES,
    }
)
async def unfollow_user(
    payload: FollowUserRequest,
    identity: Identity = Depends(get_current_identity),
    follow_service: FollowService = Depends(get_follow_service),
) -> UserFollowResponse:
    result = await follow_service.unfollow(identity, FollowTargetType.USER, payload.target_user_id)
    return UserFollowResponse(
        message=f"You unfollowed {result.target_name}",
        data=UserFollowData.from_result(result),
    )


@user_follows_router.get(
    "/{user_id}/followers/count",
    response_model=UserFollowResponse,
    summary="Follower count of an account",
)
async def user_follower_count(
    user_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    follow_service: FollowService = Depends(get_follow_service),
) -> UserFollowResponse:
    result = await follow_service.follower_count(FollowTargetType.USER, user_id)
    return UserFollowResponse(data=UserFollowData.from_result(result))


# =============================================================================
# ARTIST TARGETS
# =============================================================================

@artist_follows_router.post(
    "/{artist_id}/follow",
    response_model=ArtistFollowResponse,
    summary="Follow an artist",
    responses={
        200: {"description": "Now following"},
        409: {"description": "Already following, or own artist page"},
        **FOLLOW_RESPONSES,
    }
)
async def follow_artist(
    artist_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    follow_service: FollowService = Depends(get_follow_service),
) -> ArtistFollowResponse:
    result = await follow_service.follow(identity, FollowTargetType.ARTIST, artist_id)
    return ArtistFollowResponse(
        message=f"You are now following {result.target_name}",
        data=ArtistFollowData.from_result(result),
    )


@artist_follows_router.post(
    "/{artist_id}/unfollow",
    response_model=ArtistFollowResponse,
    summary="Unfollow an artist",
    responses={
        200: {"description": "No longer following"},
        400: {"description": "Not following this artist"},
        **FOLLOW_RESPONSES,
    }
)
async def unfollow_artist(
    artist_id: int = Path(..., ge=1),
    identity: Identity = Depends(get_current_identity),
    follow_service: FollowService = Depends(get_follow_service),
) -> ArtistFollowResponse:
    result = await follow_service.unfollow(identity, FollowTargetType.ARTIST, artist_id)
    return ArtistFollowResponse(
        message=f"You unfollowed {result.target_name}",
        data=ArtistFollowData.from_result(result),
    )


@artist_follows_router.get(
    "/{artist_id}/followers/count",
    response_model=ArtistFollowResponse,
    summary="Follower count of an artist",
)
async def artist_follower_count(
    artist_id: int = Path(..., ge=1),
    follow_service: FollowService = Depends(get_follow_service),
) -> ArtistFollowResponse:
    result = await follow_service.follower_count(FollowTargetType.ARTIST, artist_id)
    return ArtistFollowResponse(data=ArtistFollowData.from_result(result))

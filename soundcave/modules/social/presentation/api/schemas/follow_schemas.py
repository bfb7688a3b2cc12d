# 📄 File: soundcave/modules/social/presentation/api/schemas/follow_schemas.py
# 🧭 Purpose (Layman Explanation):
# Defines the follow and unfollow requests and the follower totals sent back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the follow endpoints on users and artists.
#
# 🔗 Dependencies:
# - pydantic, soundcave.modules.social.domain.models.follow
#
# 🔄 Connected Modules / Calls From:
# - soundcave.modules.social.presentation.api.v1.follows

from typing import Optional

from pydantic import BaseModel, Field

from ....domain.models.follow import FollowResult


class FollowUserRequest(BaseModel):
    target_user_id: int = Field(..., ge=1, description="Independent artist or label account to follow")


class UserFollowData(BaseModel):
    target_user_id: int
    target_name: str
    total_follower: int

    @classmethod
    def from_result(cls, result: FollowResult) -> "UserFollowData":
        return cls(
            target_user_id=result.target_id,
            target_name=result.target_name,
            total_follower=result.follower_count,
        )


class ArtistFollowData(BaseModel):
    artist_id: int
    target_name: str
    total_follower: int

    @classmethod
    def from_result(cls, result: FollowResult) -> "ArtistFollowData":
        return cls(
            artist_id=result.target_id,
            target_name=result.target_name,
            total_follower=result.follower_count,
        )


class UserFollowResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: UserFollowData


class ArtistFollowResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: ArtistFollowData

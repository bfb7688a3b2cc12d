# 📄 File: soundcave/modules/social/domain/models/follow.py
# 🧭 Purpose (Layman Explanation):
# Describes a "follow": a listener subscribing to an artist or a label, and the summary
# returned after following or unfollowing.
# 🧪 Purpose (Technical Summary):
# Domain types for the follow relationship: target kinds, the edge entity and the
# operation result carrying the recomputed follower count.
# 🔗 Dependencies:
# pydantic, enum, datetime
# 🔄 Connected Modules / Calls From:
# follow_service.py, follow_repository.py, follow API endpoints

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class FollowTargetType(str, Enum):
    """Kind of record being followed."""
    USER = "user"      # identity with role independent or label
    ARTIST = "artist"  # dedicated artist record


class Follow(BaseModel):
    """Directed edge from a fan to a target."""
    id: Optional[int] = None
    fan_id: int
    target_type: FollowTargetType
    target_id: int
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class FollowResult(BaseModel):
    """Outcome of a follow or unfollow, with the count after the change."""
    target_id: int
    target_type: FollowTargetType
    target_name: str
    follower_count: int

"""
Follow relationship entities.
"""

from .follow import Follow, FollowResult, FollowTargetType

__all__ = ["Follow", "FollowResult", "FollowTargetType"]

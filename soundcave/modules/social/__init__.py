# 📄 File: soundcave/modules/social/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lets listeners follow and unfollow independent musicians, labels and artist pages,
# and keeps follower numbers correct.
# 🧪 Purpose (Technical Summary):
# Social module implementing the follow relationship manager on a dedicated
# edge table with per-target serialization.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, soundcave.modules.user_management, soundcave.modules.catalog
# 🔄 Connected Modules / Calls From:
# soundcave.api.v1.router, catalog artist responses (follower totals)

"""
Social Module

- Follow / unfollow users with independent or label roles
- Follow / unfollow artists
- Follower counts derived from the follows table
"""

__module_name__ = "social"

__all__ = ["__module_name__"]

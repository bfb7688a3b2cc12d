# 📄 File: soundcave/modules/catalog/__init__.py
# 🧭 Purpose (Layman Explanation):
# The music catalog: artist pages and the songs that belong to them, including how
# many times songs were played and liked.
# 🧪 Purpose (Technical Summary):
# Catalog module for Artist and Music CRUD, play counting and likes.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, soundcave.shared.core
# 🔄 Connected Modules / Calls From:
# soundcave.api.v1.router, soundcave.modules.social (artist follow targets)

"""
Catalog Module

- Artists: CRUD with follower totals
- Musics: CRUD, play counter, likes
"""

__module_name__ = "catalog"

__all__ = ["__module_name__"]

# 📄 File: soundcave/modules/playlists/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lets listeners collect songs into their own playlists, share them publicly or keep
# them private, and put the songs in the order they like.
# 🧪 Purpose (Technical Summary):
# Playlists module: owner-gated playlists and ordered playlist songs referencing
# catalog tracks.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, soundcave.modules.catalog (tracks)
# 🔄 Connected Modules / Calls From:
# soundcave.api.v1.router

"""
Playlists Module

- Create, list, edit and delete playlists owned by the caller
- Private playlists are visible to their owner and admins only
- Add, reorder and remove songs
"""

__module_name__ = "playlists"

__all__ = ["__module_name__"]

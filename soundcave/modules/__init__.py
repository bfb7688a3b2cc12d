# 📄 File: soundcave/modules/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Groups the feature areas of SoundCave: accounts, the music catalog, following, and
# picture uploads.
#
# 🧪 Purpose (Technical Summary):
# Feature module package. Each module follows domain / infrastructure / presentation
# layering.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - soundcave.api.v1.router

"""
SoundCave Feature Modules

- user_management: registration, login, Google sign-in, user administration
- catalog: artists and tracks, plays and likes
- social: follow relationships between fans and users or artists
- media: image and audio uploads to object storage
"""

__all__ = []

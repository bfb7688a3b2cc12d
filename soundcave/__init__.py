# 📄 File: soundcave/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python that the 'soundcave' folder holds the SoundCave music streaming backend
# and records the basic version and package information.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info and package metadata
# for the SoundCave FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - soundcave.main (application entry point)
# - soundcave.shared.config.settings (default APP_VERSION)

"""
SoundCave - Music Streaming Catalog Backend

REST backend for users, artists and tracks with role-based access control,
follow relationships between fans and artists, and media uploads.
"""

__version__ = "1.0.0"
__title__ = "SoundCave Backend API"
__description__ = "Music streaming catalog and social graph API"
__license__ = "MIT"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
    "__license__",
]

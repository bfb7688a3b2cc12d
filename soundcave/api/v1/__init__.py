# 📄 File: soundcave/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the SoundCave API, kept in its own section so later versions can be
# added without breaking existing apps.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1 with version metadata.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# soundcave.api.v1.router, soundcave.main

__api_version__ = "v1"

__all__ = ["__api_version__"]

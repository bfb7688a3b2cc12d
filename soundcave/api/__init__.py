# 📄 File: soundcave/api/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the web-facing parts of SoundCave: the versioned API routes and the request
# handling layers every call passes through.
#
# 🧪 Purpose (Technical Summary):
# API package initialization grouping versioned routers and HTTP middleware.
#
# 🔗 Dependencies:
# - FastAPI
#
# 🔄 Connected Modules / Calls From:
# - soundcave.main (router and middleware registration)

"""
SoundCave API Layer

- v1/: versioned router aggregation and health endpoints
- middleware/: error handling, request logging, rate limiting
"""

__all__ = []

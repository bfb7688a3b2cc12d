# 📄 File: soundcave/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# Acts like a traffic director for all version 1 requests, sending account requests to
# the account handlers, song and album requests to the catalog handlers, and so on.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation that combines all module routers under /api/v1.
# 🔗 Dependencies:
# FastAPI, module presentation routers
# 🔄 Connected Modules / Calls From:
# soundcave.main

import logging

from fastapi import APIRouter

from soundcave.modules.catalog.presentation.api.v1.albums import albums_router
from soundcave.modules.catalog.presentation.api.v1.artists import artists_router
from soundcave.modules.catalog.presentation.api.v1.musics import musics_router
from soundcave.modules.media.presentation.api.v1.images import images_router
from soundcave.modules.playlists.presentation.api.v1.playlists import playlists_router
from soundcave.modules.social.presentation.api.v1.follows import (
    artist_follows_router,
    user_follows_router,
)
from soundcave.modules.user_management.presentation.api.v1.auth import auth_router, profile_router
from soundcave.modules.user_management.presentation.api.v1.users import users_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

# =========================================================================
# MODULE ROUTER INCLUDES
# =========================================================================

# User management
api_v1_router.include_router(auth_router)
api_v1_router.include_router(profile_router)

# Follow routes go before /users/{user_id} and /artists/{artist_id} so the literal
# /users/follow path is not captured as an id
api_v1_router.include_router(user_follows_router)
api_v1_router.include_router(users_router)

# Catalog
api_v1_router.include_router(artist_follows_router)
api_v1_router.include_router(artists_router)
api_v1_router.include_router(albums_router)
api_v1_router.include_router(musics_router)

# Playlists
api_v1_router.include_router(playlists_router)

# Media
api_v1_router.include_router(images_router)

logger.debug(f"API v1 router assembled with {len(api_v1_router.routes)} routes")

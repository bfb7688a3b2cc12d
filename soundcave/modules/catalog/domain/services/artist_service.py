# 📄 File: soundcave/modules/catalog/domain/services/artist_service.py
# 🧭 Purpose (Layman Explanation):
# Business rules for artist pages: creating, listing, editing and removing them, and
# showing how many followers each has. Labels only touch the pages they manage.
# 🧪 Purpose (Technical Summary):
# Domain service for Artist CRUD with ownership checks, manager account validation,
# email uniqueness checks and follower counts derived from the follow edge table.
# 🔗 Dependencies:
# ArtistRepository, FollowRepository, UserRepository
# 🔄 Connected Modules / Calls From:
# Artists API endpoints

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.modules.social.domain.models.follow import FollowTargetType
from soundcave.modules.social.domain.repositories.follow_repository import FollowRepository
from soundcave.modules.user_management.domain.repositories.user_repository import UserRepository
from soundcave.shared.core.exceptions import ConflictError, NotFoundError
from soundcave.shared.core.security import Identity

from ..models.artist import Artist
from ..repositories.artist_repository import ArtistRepository
from .ownership import ensure_manages_artist, ensure_may_assign_manager

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "ref_user_id", "name", "bio", "genre", "country", "debut_year", "website",
    "email", "phone", "social_media", "profile_image",
)


class ArtistService:
    """
    Domain service for artist pages.

    Business rules:
    - Admins manage every page; labels manage pages whose ref_user_id is theirs
    - A page created by a label without a manager is managed by that label
    - ref_user_id must name an active account
    """

    def __init__(
        self,
        session: AsyncSession,
        artist_repository: ArtistRepository,
        follow_repository: FollowRepository,
        user_repository: UserRepository
    ):
        self._session = session
        self.artist_repository = artist_repository
        self.follow_repository = follow_repository
        self.user_repository = user_repository

    async def create_artist(self, actor: Identity, data: Dict[str, Any]) -> Tuple[Artist, int]:
        """
        Create an artist page.

        Raises:
            AuthorizationError: If a non-admin links the page to another account
            NotFoundError: If ref_user_id names no active account
            ConflictError: If another artist already uses the email
        """
        artist = Artist(**data)
        if artist.ref_user_id is None and not actor.is_admin():
            artist.ref_user_id = actor.id

        ensure_may_assign_manager(actor, artist.ref_user_id)
        await self._ensure_manager_exists(artist.ref_user_id)
        await self._ensure_email_free(artist.email)

        created = await self.artist_repository.create(artist)
        await self._session.commit()
        logger.info(f"Artist {created.id} created by user {actor.id}")
        return created, 0

    async def get_artist(self, artist_id: int) -> Tuple[Artist, int]:
        artist = await self.artist_repository.get_by_id(artist_id)
        if artist is None:
            raise NotFoundError("Artist not found", resource_type="artist", resource_id=artist_id)
        return artist, await self.follow_repository.count_followers(FollowTargetType.ARTIST, artist.id)

    async def list_artists(
        self,
        offset: int,
        limit: int,
        genre: Optional[str] = None,
        country: Optional[str] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Tuple[Artist, int]], int]:
        artists, total = await self.artist_repository.list_artists(
            offset=offset, limit=limit, genre=genre, country=country, search=search
        )
        followers = await self.follow_repository.count_followers_for(
            FollowTargetType.ARTIST, [artist.id for artist in artists]
        )
        return [(artist, followers.get(artist.id, 0)) for artist in artists], total

    async def update_artist(
        self,
        actor: Identity,
        artist_id: int,
        changes: Dict[str, Any]
    ) -> Tuple[Artist, int]:
        """
        Raises:
            NotFoundError: If the artist or the new manager account does not exist
            AuthorizationError: If the caller does not manage the page, or a
                non-admin hands it to another account
            ConflictError: If the new email belongs to another artist
        """
        artist, followers = await self.get_artist(artist_id)
        ensure_manages_artist(actor, artist)

        new_manager = changes.get("ref_user_id")
        if new_manager is not None and new_manager != artist.ref_user_id:
            ensure_may_assign_manager(actor, new_manager)
            await self._ensure_manager_exists(new_manager)

        new_email = changes.get("email")
        if new_email and new_email.strip().lower() != artist.email:
            await self._ensure_email_free(new_email, exclude_id=artist_id)

        for field in UPDATABLE_FIELDS:
            if field in changes and changes[field] is not None:
                setattr(artist, field, changes[field])
        artist.touch()

        updated = await self.artist_repository.update(artist)
        await self._session.commit()
        logger.info(f"Updated artist {artist_id} by user {actor.id}")
        return updated, followers

    async def delete_artist(self, actor: Identity, artist_id: int) -> None:
        artist, _ = await self.get_artist(artist_id)
        ensure_manages_artist(actor, artist)

        if not await self.artist_repository.soft_delete(artist_id):
            raise NotFoundError("Artist not found", resource_type="artist", resource_id=artist_id)
        await self._session.commit()
        logger.info(f"Deleted artist {artist_id} by user {actor.id}")

    async def _ensure_manager_exists(self, user_id: Optional[int]) -> None:
        if user_id is None:
            return
        if await self.user_repository.get_by_id(user_id) is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)

    async def _ensure_email_free(self, email: str, exclude_id: Optional[int] = None) -> None:
        existing = await self.artist_repository.get_by_email(email)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError(
                "Email is already registered to another artist",
                resource_type="artist",
                conflict_field="email",
                existing_value=email,
            )

# 📄 File: soundcave/modules/catalog/domain/services/album_service.py
# 🧭 Purpose (Layman Explanation):
# Business rules for album releases: an album belongs to an existing artist, and only
# that artist's manager (or an admin) can publish, edit or remove it.
# 🧪 Purpose (Technical Summary):
# Domain service for Album CRUD gated by artist ownership.
# 🔗 Dependencies:
# AlbumRepository, ArtistRepository
# 🔄 Connected Modules / Calls From:
# Albums API endpoints

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.core.exceptions import NotFoundError
from soundcave.shared.core.security import Identity

from ..models.album import Album, AlbumType
from ..models.artist import Artist
from ..repositories.album_repository import AlbumRepository
from ..repositories.artist_repository import ArtistRepository
from .ownership import ensure_manages_artist

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "title", "artist_id", "artist", "release_date", "album_type", "genre",
    "total_tracks", "record_label", "image",
)


class AlbumService:
    """Domain service for album releases."""

    def __init__(
        self,
        session: AsyncSession,
        album_repository: AlbumRepository,
        artist_repository: ArtistRepository
    ):
        self._session = session
        self.album_repository = album_repository
        self.artist_repository = artist_repository

    async def create_album(self, actor: Identity, data: Dict[str, Any]) -> Album:
        """
        Raises:
            NotFoundError: If the artist does not exist
            AuthorizationError: If the caller does not manage the artist
        """
        ensure_manages_artist(actor, await self._get_artist(data["artist_id"]))
        created = await self.album_repository.create(Album(**data))
        await self._session.commit()
        logger.info(f"Album {created.id} created by user {actor.id}")
        return created

    async def get_album(self, album_id: int) -> Album:
        album = await self.album_repository.get_by_id(album_id)
        if album is None:
            raise NotFoundError("Album not found", resource_type="album", resource_id=album_id)
        return album

    async def list_albums(
        self,
        offset: int,
        limit: int,
        artist_id: Optional[int] = None,
        album_type: Optional[AlbumType] = None,
        genre: Optional[str] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Album], int]:
        return await self.album_repository.list_albums(
            offset=offset,
            limit=limit,
            artist_id=artist_id,
            album_type=album_type,
            genre=genre,
            search=search,
        )

    async def update_album(self, actor: Identity, album_id: int, changes: Dict[str, Any]) -> Album:
        album = await self.get_album(album_id)
        ensure_manages_artist(actor, await self.artist_repository.get_by_id(album.artist_id))

        if changes.get("artist_id") is not None and changes["artist_id"] != album.artist_id:
            ensure_manages_artist(actor, await self._get_artist(changes["artist_id"]))

        for field in UPDATABLE_FIELDS:
            if field in changes and changes[field] is not None:
                setattr(album, field, changes[field])
        album.touch()

        updated = await self.album_repository.update(album)
        await self._session.commit()
        logger.info(f"Updated album {album_id} by user {actor.id}")
        return updated

    async def delete_album(self, actor: Identity, album_id: int) -> None:
        album = await self.get_album(album_id)
        ensure_manages_artist(actor, await self.artist_repository.get_by_id(album.artist_id))

        if not await self.album_repository.soft_delete(album_id):
            raise NotFoundError("Album not found", resource_type="album", resource_id=album_id)
        await self._session.commit()
        logger.info(f"Deleted album {album_id} by user {actor.id}")

    async def _get_artist(self, artist_id: int) -> Artist:
        artist = await self.artist_repository.get_by_id(artist_id)
        if artist is None:
            raise NotFoundError("Artist not found", resource_type="artist", resource_id=artist_id)
        return artist

# 📄 File: soundcave/modules/playlists/domain/services/playlist_service.py
# 🧭 Purpose (Layman Explanation):
# Business rules for playlists: anyone signed in can make one, only the owner (or an
# admin) can change it, and private playlists stay hidden from everyone else.
# 🧪 Purpose (Technical Summary):
# Domain service for playlist CRUD and playlist song management with owner checks and
# visibility rules. Songs are appended at the end unless a position is given.
# 🔗 Dependencies:
# PlaylistRepository, catalog MusicRepository
# 🔄 Connected Modules / Calls From:
# Playlists API endpoints

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.modules.catalog.domain.repositories.music_repository import MusicRepository
from soundcave.shared.core.exceptions import AuthorizationError, NotFoundError
from soundcave.shared.core.security import Identity

from ..models.playlist import Playlist, PlaylistSong
from ..repositories.playlist_repository import PlaylistRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "description", "is_public", "cover_image")


class PlaylistService:
    """
    Domain service for playlists.

    Business rules:
    - A playlist belongs to the account that created it
    - Only the owner or an admin changes a playlist or its songs
    - A private playlist is reported as missing to everyone but its owner and admins
    - A track appears at most once per playlist
    """

    def __init__(
        self,
        session: AsyncSession,
        playlist_repository: PlaylistRepository,
        music_repository: MusicRepository
    ):
        self._session = session
        self.playlist_repository = playlist_repository
        self.music_repository = music_repository

    async def create_playlist(self, owner: Identity, data: Dict[str, Any]) -> Playlist:
        created = await self.playlist_repository.create(Playlist(user_id=owner.id, **data))
        await self._session.commit()
        logger.info(f"Playlist {created.id} created by user {owner.id}")
        return created

    async def get_playlist(self, viewer: Identity, playlist_id: int) -> Playlist:
        """
        Raises:
            NotFoundError: If the playlist does not exist or is private to someone else
        """
        playlist = await self.playlist_repository.get_by_id(playlist_id)
        if playlist is None or not self._can_view(viewer, playlist):
            raise NotFoundError("Playlist not found", resource_type="playlist", resource_id=playlist_id)
        return playlist

    async def list_playlists(
        self,
        viewer: Identity,
        offset: int,
        limit: int,
        owner_id: Optional[int] = None,
        is_public: Optional[bool] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Playlist], int]:
        return await self.playlist_repository.list_playlists(
            offset=offset,
            limit=limit,
            viewer_id=None if viewer.is_admin() else viewer.id,
            owner_id=owner_id,
            is_public=is_public,
            search=search,
        )

    async def update_playlist(self, actor: Identity, playlist_id: int, changes: Dict[str, Any]) -> Playlist:
        playlist = await self._get_owned(actor, playlist_id)

        for field in UPDATABLE_FIELDS:
            if field in changes and changes[field] is not None:
                setattr(playlist, field, changes[field])
        playlist.touch()

        updated = await self.playlist_repository.update(playlist)
        await self._session.commit()
        logger.info(f"Updated playlist {playlist_id} by user {actor.id}")
        return updated

    async def delete_playlist(self, actor: Identity, playlist_id: int) -> None:
        await self._get_owned(actor, playlist_id)
        if not await self.playlist_repository.soft_delete(playlist_id):
            raise NotFoundError("Playlist not found", resource_type="playlist", resource_id=playlist_id)
        await self._session.commit()
        logger.info(f"Deleted playlist {playlist_id} by user {actor.id}")

    # =========================================================================
    # SONGS
    # =========================================================================

    async def list_songs(self, viewer: Identity, playlist_id: int) -> List[PlaylistSong]:
        await self.get_playlist(viewer, playlist_id)
        return await self.playlist_repository.list_songs(playlist_id)

    async def add_song(
        self,
        actor: Identity,
        playlist_id: int,
        music_id: int,
        position: Optional[int] = None
    ) -> PlaylistSong:
        """
        Add a track; without a position it goes after the last song.

        Raises:
            NotFoundError: If the playlist or the track does not exist
            AuthorizationError: If the caller does not own the playlist
            ConflictError: If the track is already in the playlist
        """
        await self._get_owned(actor, playlist_id)
        if await self.music_repository.get_by_id(music_id) is None:
            raise NotFoundError("Music not found", resource_type="music", resource_id=music_id)

        if position is None:
            position = await self.playlist_repository.next_position(playlist_id)

        song = await self.playlist_repository.add_song(playlist_id, music_id, position)
        await self._session.commit()
        logger.info(f"Music {music_id} added to playlist {playlist_id} at position {position}")
        return song

    async def move_song(self, actor: Identity, playlist_id: int, music_id: int, position: int) -> PlaylistSong:
        await self._get_owned(actor, playlist_id)
        song = await self.playlist_repository.set_position(playlist_id, music_id, position)
        if song is None:
            raise self._song_not_found(playlist_id, music_id)
        await self._session.commit()
        return song

    async def remove_song(self, actor: Identity, playlist_id: int, music_id: int) -> None:
        await self._get_owned(actor, playlist_id)
        if not await self.playlist_repository.remove_song(playlist_id, music_id):
            raise self._song_not_found(playlist_id, music_id)
        await self._session.commit()
        logger.info(f"Music {music_id} removed from playlist {playlist_id}")

    # =========================================================================
    # RULES
    # =========================================================================

    def _can_view(self, viewer: Identity, playlist: Playlist) -> bool:
        return playlist.is_public or viewer.is_admin() or playlist.is_owned_by(viewer.id)

    async def _get_owned(self, actor: Identity, playlist_id: int) -> Playlist:
        playlist = await self.get_playlist(actor, playlist_id)
        if not actor.is_admin() and not playlist.is_owned_by(actor.id):
            raise AuthorizationError(
                "You can only change your own playlists",
                actual_role=actor.role.value,
                reason="not_owner",
            )
        return playlist

    @staticmethod
    def _song_not_found(playlist_id: int, music_id: int) -> NotFoundError:
        return NotFoundError(
            "Music is not in this playlist",
            resource_type="playlist_song",
            details={"playlist_id": playlist_id, "music_id": music_id},
        )

# 📄 File: soundcave/modules/catalog/domain/services/music_service.py
# 🧭 Purpose (Layman Explanation):
# Business rules for songs: adding them to an artist, listing and editing them, counting
# plays, and letting listeners like or unlike a song once.
# 🧪 Purpose (Technical Summary):
# Domain service for Music CRUD gated by artist ownership, atomic play counting and
# unique likes.
# 🔗 Dependencies:
# MusicRepository, ArtistRepository
# 🔄 Connected Modules / Calls From:
# Musics API endpoints

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.core.exceptions import InvalidStateError, NotFoundError
from soundcave.shared.core.security import Identity

from ..models.artist import Artist
from ..models.music import Music
from ..repositories.artist_repository import ArtistRepository
from ..repositories.music_repository import MusicRepository
from .ownership import ensure_manages_artist

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "title", "artist", "artist_id", "album", "genre", "release_date", "duration",
    "language", "explicit", "lyrics", "description", "tags", "audio_file_url",
    "cover_image_url",
)


class MusicService:
    """
    Domain service for the music catalog.

    Business rules:
    - A track must belong to an existing artist
    - Non-admins change only tracks of artists they manage, and may only move
      a track to another artist they manage
    - Plays are counted with a single atomic UPDATE
    - A user likes a track at most once; the like count is the number of likes
    """

    def __init__(
        self,
        session: AsyncSession,
        music_repository: MusicRepository,
        artist_repository: ArtistRepository
    ):
        self._session = session
        self.music_repository = music_repository
        self.artist_repository = artist_repository

    async def create_music(self, actor: Identity, data: Dict[str, Any]) -> Music:
        """
        Raises:
            NotFoundError: If the artist does not exist
            AuthorizationError: If the caller does not manage the artist
        """
        ensure_manages_artist(actor, await self._get_artist(data["artist_id"]))
        created = await self.music_repository.create(Music(**data))
        await self._session.commit()
        logger.info(f"Music {created.id} created by user {actor.id}")
        return created

    async def get_music(self, music_id: int) -> Music:
        music = await self.music_repository.get_by_id(music_id)
        if music is None:
            raise NotFoundError("Music not found", resource_type="music", resource_id=music_id)
        return music

    async def list_musics(self, offset: int, limit: int, **filters: Optional[Any]) -> Tuple[List[Music], int]:
        return await self.music_repository.list_musics(offset=offset, limit=limit, **filters)

    async def update_music(self, actor: Identity, music_id: int, changes: Dict[str, Any]) -> Music:
        music = await self.get_music(music_id)
        await self._ensure_manages_track(actor, music)

        if changes.get("artist_id") is not None and changes["artist_id"] != music.artist_id:
            ensure_manages_artist(actor, await self._get_artist(changes["artist_id"]))

        for field in UPDATABLE_FIELDS:
            if field in changes and changes[field] is not None:
                setattr(music, field, changes[field])
        music.touch()

        updated = await self.music_repository.update(music)
        await self._session.commit()
        logger.info(f"Updated music {music_id} by user {actor.id}")
        return updated

    async def delete_music(self, actor: Identity, music_id: int) -> None:
        await self._ensure_manages_track(actor, await self.get_music(music_id))
        if not await self.music_repository.soft_delete(music_id):
            raise NotFoundError("Music not found", resource_type="music", resource_id=music_id)
        await self._session.commit()
        logger.info(f"Deleted music {music_id} by user {actor.id}")

    async def record_play(self, music_id: int) -> int:
        """Add one play and return the new total."""
        play_count = await self.music_repository.increment_play_count(music_id)
        if play_count is None:
            raise NotFoundError("Music not found", resource_type="music", resource_id=music_id)
        await self._session.commit()
        return play_count

    async def like(self, identity: Identity, music_id: int) -> int:
        """
        Like a track once.

        Raises:
            NotFoundError: If the track does not exist
            ConflictError: If the caller already likes it
        """
        await self.get_music(music_id)
        await self.music_repository.add_like(identity.id, music_id)
        count = await self.music_repository.count_likes(music_id)
        await self._session.commit()
        logger.info(f"User {identity.id} liked music {music_id}")
        return count

    async def unlike(self, identity: Identity, music_id: int) -> int:
        """
        Raises:
            NotFoundError: If the track does not exist
            InvalidStateError: If the caller has not liked it
        """
        await self.get_music(music_id)
        if not await self.music_repository.remove_like(identity.id, music_id):
            raise InvalidStateError("You have not liked this music", resource_type="music_like")
        count = await self.music_repository.count_likes(music_id)
        await self._session.commit()
        return count

    async def _get_artist(self, artist_id: int) -> Artist:
        artist = await self.artist_repository.get_by_id(artist_id)
        if artist is None:
            raise NotFoundError("Artist not found", resource_type="artist", resource_id=artist_id)
        return artist

    async def _ensure_manages_track(self, actor: Identity, music: Music) -> None:
        # A track whose artist page was removed is admin-only
        ensure_manages_artist(actor, await self.artist_repository.get_by_id(music.artist_id))

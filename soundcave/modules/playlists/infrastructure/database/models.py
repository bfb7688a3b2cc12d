# 📄 File: soundcave/modules/playlists/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how playlists and the songs inside them are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for playlists (soft delete) and playlist_songs. The unique
# constraint keeps a track from appearing twice in one playlist.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - soundcave.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - playlist_repository_impl.py
# - Alembic migration scripts

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint, func, true

from soundcave.shared.config.database import DatabaseBase


class PlaylistModel(DatabaseBase):
    """Playlist record."""
    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="Unique playlist identifier")
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Owning account"
    )
    name = Column(String(255), nullable=False, comment="Playlist name")
    description = Column(Text, nullable=True)
    is_public = Column(Boolean, nullable=False, default=True, server_default=true(), comment="Visible to everyone")
    cover_image = Column(String(500), nullable=True, comment="Cover image URL")

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True, comment="Soft-delete timestamp")

    def __repr__(self) -> str:
        return f"<PlaylistModel(id={self.id}, name={self.name})>"


class PlaylistSongModel(DatabaseBase):
    """A track in a playlist; at most one row per pair."""
    __tablename__ = "playlist_songs"
    __table_args__ = (
        UniqueConstraint("playlist_id", "music_id", name="uq_playlist_songs_playlist_music"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    playlist_id = Column(Integer, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True)
    music_id = Column(Integer, ForeignKey("musics.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0, server_default="0", comment="Sort order, ascending")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

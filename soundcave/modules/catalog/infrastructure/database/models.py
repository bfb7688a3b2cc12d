# 📄 File: soundcave/modules/catalog/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how artists, albums, songs and song likes are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the catalog tables with constraints, indexes and
# soft-delete columns.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - soundcave.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - artist_repository_impl.py, album_repository_impl.py, music_repository_impl.py
# - social follow repository (artist row locks)
# - Alembic migration scripts

"""
SQLAlchemy Models for the Catalog

Models:
- ArtistModel: Artist pages, optionally managed by an identity
- AlbumModel: Releases owned through their artist
- MusicModel: Tracks with an atomic play counter
- MusicLikeModel: One row per (user, track) like
"""

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)

from soundcave.shared.config.database import DatabaseBase


# =============================================================================
# ARTIST MODEL
# =============================================================================

class ArtistModel(DatabaseBase):
    """Artist page record."""
    __tablename__ = "artists"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="Unique artist identifier")
    ref_user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Identity managing this artist (independent artist or label)"
    )

    name = Column(String(255), nullable=False, index=True, comment="Artist name")
    bio = Column(Text, nullable=False, default="", comment="Artist biography")
    genre = Column(String(100), nullable=True, comment="Main genre")
    country = Column(String(100), nullable=True, comment="Country of origin")
    debut_year = Column(String(4), nullable=True, comment="Debut year (YYYY)")
    website = Column(String(255), nullable=True, comment="Official website")
    email = Column(String(255), nullable=False, index=True, comment="Contact email")
    phone = Column(String(20), nullable=True, comment="Contact phone")
    social_media = Column(JSON, nullable=True, comment="Social media handles keyed by network")
    profile_image = Column(String(255), nullable=True, comment="Profile image URL")

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True, comment="Soft-delete timestamp")

    def __repr__(self) -> str:
        return f"<ArtistModel(id={self.id}, name={self.name})>"


# =============================================================================
# ALBUM MODEL
# =============================================================================

class AlbumModel(DatabaseBase):
    """Album release record."""
    __tablename__ = "albums"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="Unique album identifier")
    title = Column(String(255), nullable=False, index=True, comment="Album title")
    artist_id = Column(
        Integer,
        ForeignKey("artists.id"),
        nullable=False,
        index=True,
        comment="Releasing artist"
    )
    artist = Column(String(255), nullable=False, comment="Display artist name")
    release_date = Column(Date, nullable=False, comment="Release date")
    album_type = Column(String(20), nullable=False, comment="single, EP, album or compilation")
    genre = Column(String(100), nullable=True, comment="Genre")
    total_tracks = Column(Integer, nullable=False, default=0, server_default="0", comment="Number of tracks")
    record_label = Column(String(255), nullable=True, comment="Record label name")
    image = Column(String(500), nullable=True, comment="Cover image URL")

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True, comment="Soft-delete timestamp")

    def __repr__(self) -> str:
        return f"<AlbumModel(id={self.id}, title={self.title})>"


# =============================================================================
# MUSIC MODELS
# =============================================================================

class MusicModel(DatabaseBase):
    """Track record. ``play_count`` is only ever changed by an atomic UPDATE."""
    __tablename__ = "musics"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="Unique track identifier")
    title = Column(String(255), nullable=False, index=True, comment="Track title")
    artist = Column(String(255), nullable=False, comment="Display artist name")
    artist_id = Column(
        Integer,
        ForeignKey("artists.id"),
        nullable=False,
        index=True,
        comment="Owning artist"
    )
    album = Column(String(255), nullable=True, comment="Album name")
    genre = Column(String(100), nullable=False, comment="Genre")
    release_date = Column(Date, nullable=True, comment="Release date")
    duration = Column(String(10), nullable=False, comment="MM:SS or HH:MM:SS")
    language = Column(String(50), nullable=False, comment="Lyrics language")
    explicit = Column(Boolean, nullable=False, default=False, server_default="0", comment="Explicit content flag")
    lyrics = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    tags = Column(Text, nullable=True, comment="Comma separated tags")
    audio_file_url = Column(String(500), nullable=False, comment="Public audio URL")
    cover_image_url = Column(String(500), nullable=True, comment="Public cover image URL")
    play_count = Column(Integer, nullable=False, default=0, server_default="0", comment="Total plays")

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True, comment="Soft-delete timestamp")

    def __repr__(self) -> str:
        return f"<MusicModel(id={self.id}, title={self.title})>"


class MusicLikeModel(DatabaseBase):
    """A user's like of a track; at most one per pair."""
    __tablename__ = "music_likes"
    __table_args__ = (
        UniqueConstraint("user_id", "music_id", name="uq_music_likes_user_music"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    music_id = Column(Integer, ForeignKey("musics.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

# 📄 File: soundcave/modules/social/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how follows are stored: one row per fan per followed artist or label.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the follows edge table. The unique constraint makes a
# duplicate follow impossible and the check constraint forbids following yourself.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - soundcave.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - follow_repository_impl.py
# - Alembic migration scripts

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer, String, UniqueConstraint, func

from soundcave.shared.config.database import DatabaseBase


class FollowModel(DatabaseBase):
    """
    Follow edge.

    ``target_id`` references users.id when ``target_type`` is 'user' and
    artists.id when it is 'artist', so it carries no foreign key.
    """
    __tablename__ = "follows"
    __table_args__ = (
        UniqueConstraint("fan_id", "target_type", "target_id", name="uq_follows_fan_target"),
        CheckConstraint("target_type IN ('user', 'artist')", name="target_type_valid"),
        CheckConstraint("NOT (target_type = 'user' AND fan_id = target_id)", name="no_self_follow"),
        Index("ix_follows_target", "target_type", "target_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True, comment="Unique edge identifier")
    fan_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Following identity"
    )
    target_type = Column(String(10), nullable=False, comment="'user' or 'artist'")
    target_id = Column(Integer, nullable=False, comment="Followed user or artist id")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="When the follow happened"
    )

    def __repr__(self) -> str:
        return f"<FollowModel(fan_id={self.fan_id}, {self.target_type}={self.target_id})>"

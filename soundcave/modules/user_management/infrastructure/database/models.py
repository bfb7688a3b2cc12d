# 📄 File: soundcave/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how SoundCave accounts are stored in the database: names, contact
# details, the kind of account, and when an account was removed.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the users table, mapping the User domain model to
# PostgreSQL (and SQLite in tests) with constraints and soft-delete support.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - soundcave.shared.config.database (declarative base with naming convention)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py (CRUD operations)
# - social follow edges (foreign key to users.id)
# - Alembic migration scripts (schema generation)

"""
SQLAlchemy Models for User Management

Models:
- UserModel: Identity record shared by listeners, artists, labels and admins

Accounts are never hard-deleted; ``deleted_at`` marks removal.
"""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from soundcave.shared.config.database import DatabaseBase


# =============================================================================
# USER MODEL
# =============================================================================

class UserModel(DatabaseBase):
    """
    SQLAlchemy model for SoundCave identities.

    ``password_hash`` is nullable because Google sign-in accounts have no
    local password. ``role`` holds one of the Role enum values.
    """
    __tablename__ = "users"

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Unique identifier for each user"
    )

    full_name = Column(
        String(255),
        nullable=False,
        comment="Display name"
    )
    email = Column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
        comment="Lower-cased email address"
    )
    password_hash = Column(
        String(255),
        nullable=True,
        comment="bcrypt hash; NULL for Google sign-in accounts"
    )

    phone = Column(String(50), nullable=True, comment="Contact phone number")
    location = Column(String(255), nullable=True, comment="Free-form location")
    bio = Column(Text, nullable=True, comment="Profile biography")
    profile_image = Column(String(500), nullable=True, comment="Profile image URL")

    role = Column(
        String(20),
        nullable=False,
        default="user",
        server_default="user",
        index=True,
        comment="Account role: user, admin, premium, independent, label"
    )

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Account creation date"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        comment="Last modification date"
    )
    deleted_at = Column(
        DateTime(timezone=True),
        nullable=True,
        index=True,
        comment="Soft-delete timestamp"
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"

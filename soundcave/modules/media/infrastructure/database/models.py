# 📄 File: soundcave/modules/media/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how records of uploaded pictures are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the images table.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - soundcave.shared.config.database (declarative base)
#
# 🔄 Connected Modules / Calls From:
# - image_repository_impl.py
# - Alembic migration scripts

from sqlalchemy import BigInteger, Column, DateTime, Integer, String, func

from soundcave.shared.config.database import DatabaseBase


class ImageModel(DatabaseBase):
    """Uploaded image metadata; the bytes live in object storage."""
    __tablename__ = "images"

    id = Column(Integer, primary_key=True, autoincrement=True, comment="Unique image identifier")
    file_name = Column(String(255), nullable=False, comment="Original client filename")
    file_url = Column(String(500), nullable=False, comment="Public URL")
    file_size = Column(BigInteger, nullable=False, default=0, comment="Size in bytes")
    content_type = Column(String(100), nullable=False, comment="MIME type")
    bucket_path = Column(String(500), nullable=False, comment="Object key in the storage bucket")

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True, comment="Soft-delete timestamp")

    def __repr__(self) -> str:
        return f"<ImageModel(id={self.id}, bucket_path={self.bucket_path})>"

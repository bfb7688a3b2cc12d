# 📄 File: soundcave/modules/catalog/infrastructure/database/artist_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Saves, finds, lists, edits and removes artist pages in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ArtistRepository with domain mapping, filtering,
# pagination and optional row locking for follow operations.
#
# 🔗 Dependencies:
# - SQLAlchemy async session, catalog ORM models
#
# 🔄 Connected Modules / Calls From:
# - artist_service.py, follow_service.py

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.core.exceptions import ConflictError, NotFoundError

from ...domain.models.artist import Artist
from ...domain.repositories.artist_repository import ArtistRepository
from .models import ArtistModel

logger = logging.getLogger(__name__)


class ArtistRepositoryImpl(ArtistRepository):
    """SQLAlchemy implementation of the ArtistRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, artist: Artist) -> Artist:
        model = ArtistModel(
            ref_user_id=artist.ref_user_id,
            name=artist.name,
            bio=artist.bio,
            genre=artist.genre,
            country=artist.country,
            debut_year=artist.debut_year,
            website=artist.website,
            email=artist.email,
            phone=artist.phone,
            social_media=artist.social_media or {},
            profile_image=artist.profile_image,
            created_at=artist.created_at,
            updated_at=artist.updated_at,
        )
        try:
            self._session.add(model)
            await self._session.flush()
            await self._session.refresh(model)
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Artist creation rejected by constraint: {e}")
            raise self._constraint_conflict(artist) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error during artist creation: {e}")
            raise

        logger.info(f"Created artist with ID: {model.id}")
        return self._model_to_domain(model)

    async def get_by_id(self, artist_id: int, for_update: bool = False) -> Optional[Artist]:
        stmt = select(ArtistModel).where(
            ArtistModel.id == artist_id,
            ArtistModel.deleted_at.is_(None),
        )
        if for_update:
            stmt = stmt.with_for_update()

        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._model_to_domain(model) if model else None

    async def get_by_email(self, email: str) -> Optional[Artist]:
        result = await self._session.execute(
            select(ArtistModel).where(
                ArtistModel.email == email.strip().lower(),
                ArtistModel.deleted_at.is_(None),
            )
        )
        model = result.scalars().first()
        return self._model_to_domain(model) if model else None

    async def list_artists(
        self,
        offset: int = 0,
        limit: int = 10,
        genre: Optional[str] = None,
        country: Optional[str] = None,
        search: Optional[str] = None
    ) -> Tuple[List[Artist], int]:
        conditions = [ArtistModel.deleted_at.is_(None)]
        if genre:
            conditions.append(func.lower(ArtistModel.genre).like(f"%{genre.strip().lower()}%"))
        if country:
            conditions.append(ArtistModel.country == country)
        if search:
            pattern = f"%{search.strip().lower()}%"
            conditions.append(
                or_(
                    func.lower(ArtistModel.name).like(pattern),
                    func.lower(ArtistModel.email).like(pattern),
                )
            )

        try:
            total = await self._session.scalar(
                select(func.count()).select_from(ArtistModel).where(*conditions)
            )
            result = await self._session.execute(
                select(ArtistModel)
                .where(*conditions)
                .order_by(ArtistModel.created_at.desc(), ArtistModel.id.desc())
                .offset(offset)
                .limit(limit)
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error listing artists: {e}")
            raise

        return [self._model_to_domain(m) for m in result.scalars().all()], int(total or 0)

    async def update(self, artist: Artist) -> Artist:
        model = await self._session.get(ArtistModel, artist.id)
        if model is None or model.deleted_at is not None:
            raise NotFoundError("Artist not found", resource_type="artist", resource_id=artist.id)

        model.ref_user_id = artist.ref_user_id
        model.name = artist.name
        model.bio = artist.bio
        model.genre = artist.genre
        model.country = artist.country
        model.debut_year = artist.debut_year
        model.website = artist.website
        model.email = artist.email
        model.phone = artist.phone
        model.social_media = dict(artist.social_media or {})
        model.profile_image = artist.profile_image
        model.updated_at = datetime.now(timezone.utc)

        try:
            await self._session.flush()
            await self._session.refresh(model)
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Artist {artist.id} update rejected by constraint: {e}")
            raise self._constraint_conflict(artist) from e
        logger.info(f"Updated artist: {artist.id}")
        return self._model_to_domain(model)

    async def soft_delete(self, artist_id: int) -> bool:
        now = datetime.now(timezone.utc)
        result = await self._session.execute(
            update(ArtistModel)
            .where(ArtistModel.id == artist_id, ArtistModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        return result.rowcount > 0

    @staticmethod
    def _constraint_conflict(artist: Artist) -> ConflictError:
        # The manager foreign key is the only constraint a write here can break
        return ConflictError(
            "Artist conflicts with existing data",
            resource_type="artist",
            conflict_field="ref_user_id",
            existing_value=artist.ref_user_id,
        )

    def _model_to_domain(self, model: ArtistModel) -> Artist:
        return Artist(
            id=model.id,
            ref_user_id=model.ref_user_id,
            name=model.name,
            bio=model.bio or "",
            genre=model.genre,
            country=model.country,
            debut_year=model.debut_year,
            website=model.website,
            email=model.email,
            phone=model.phone,
            social_media=model.social_media or {},
            profile_image=model.profile_image,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

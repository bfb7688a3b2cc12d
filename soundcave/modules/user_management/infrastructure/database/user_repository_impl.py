# 📄 File: soundcave/modules/user_management/infrastructure/database/user_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for accounts: saving new ones, finding them by
# id or email, listing them for admins, updating them and marking them removed.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of UserRepository using SQLAlchemy async sessions, mapping
# between the User domain model and UserModel rows with error translation and logging.
#
# 🔗 Dependencies:
# - soundcave.modules.user_management.domain.repositories.user_repository (interface)
# - soundcave.modules.user_management.infrastructure.database.models (UserModel)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - auth_service.py, user_service.py (account operations)
# - follow_service.py (target lookups with row locks)

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.core.exceptions import ConflictError, NotFoundError
from soundcave.shared.core.roles import Role

from ...domain.models.user import User
from ...domain.repositories.user_repository import UserRepository
from .models import UserModel

logger = logging.getLogger(__name__)


class UserRepositoryImpl(UserRepository):
    """
    SQLAlchemy implementation of the UserRepository interface.

    Database errors other than integrity violations are logged and re-raised
    unchanged so the error middleware can answer with an opaque 500.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, user: User) -> User:
        user_model = self._domain_to_model(user)
        try:
            self._session.add(user_model)
            await self._session.flush()
            await self._session.refresh(user_model)
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"User creation failed - email already exists: {user.email}")
            raise ConflictError(
                "Email is already registered",
                resource_type="user",
                conflict_field="email",
                existing_value=user.email,
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error during user creation: {e}")
            raise

        logger.info(f"Created user with ID: {user_model.id}")
        return self._model_to_domain(user_model)

    async def get_by_id(
        self,
        user_id: int,
        include_deleted: bool = False,
        for_update: bool = False
    ) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        if not include_deleted:
            stmt = stmt.where(UserModel.deleted_at.is_(None))
        if for_update:
            stmt = stmt.with_for_update()

        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user {user_id}: {e}")
            raise

        user_model = result.scalar_one_or_none()
        if user_model is None:
            logger.debug(f"User not found: {user_id}")
            return None
        return self._model_to_domain(user_model)

    async def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(
            UserModel.email == email.strip().lower(),
            UserModel.deleted_at.is_(None),
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving user by email {email}: {e}")
            raise

        user_model = result.scalar_one_or_none()
        return self._model_to_domain(user_model) if user_model else None

    async def list_users(
        self,
        offset: int = 0,
        limit: int = 10,
        role: Optional[Role] = None,
        search: Optional[str] = None
    ) -> Tuple[List[User], int]:
        conditions = [UserModel.deleted_at.is_(None)]
        if role is not None:
            conditions.append(UserModel.role == role.value)
        if search:
            pattern = f"%{search.strip().lower()}%"
            conditions.append(
                or_(
                    func.lower(UserModel.full_name).like(pattern),
                    func.lower(UserModel.email).like(pattern),
                )
            )

        try:
            total = await self._session.scalar(
                select(func.count()).select_from(UserModel).where(*conditions)
            )
            result = await self._session.execute(
                select(UserModel)
                .where(*conditions)
                .order_by(UserModel.created_at.desc(), UserModel.id.desc())
                .offset(offset)
                .limit(limit)
            )
        except SQLAlchemyError as e:
            logger.error(f"Database error listing users: {e}")
            raise

        users = [self._model_to_domain(model) for model in result.scalars().all()]
        return users, int(total or 0)

    async def update(self, user: User) -> User:
        user_model = await self._session.get(UserModel, user.id)
        if user_model is None or user_model.deleted_at is not None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user.id)

        user_model.full_name = user.full_name
        user_model.email = user.email
        user_model.password_hash = user.password_hash
        user_model.phone = user.phone
        user_model.location = user.location
        user_model.bio = user.bio
        user_model.profile_image = user.profile_image
        user_model.role = user.role.value
        user_model.updated_at = datetime.now(timezone.utc)

        try:
            await self._session.flush()
            await self._session.refresh(user_model)
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"User update failed - email already exists: {user.email}")
            raise ConflictError(
                "Email is already registered",
                resource_type="user",
                conflict_field="email",
                existing_value=user.email,
            ) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error updating user {user.id}: {e}")
            raise

        logger.info(f"Updated user: {user.id}")
        return self._model_to_domain(user_model)

    async def soft_delete(self, user_id: int) -> bool:
        now = datetime.now(timezone.utc)
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id, UserModel.deleted_at.is_(None))
            .values(deleted_at=now, updated_at=now)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            logger.error(f"Database error deleting user {user_id}: {e}")
            raise

        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Soft deleted user: {user_id}")
        return deleted

    # =========================================================================
    # MAPPING
    # =========================================================================

    def _domain_to_model(self, user: User) -> UserModel:
        now = datetime.now(timezone.utc)
        return UserModel(
            full_name=user.full_name,
            email=user.email,
            password_hash=user.password_hash,
            phone=user.phone,
            location=user.location,
            bio=user.bio,
            profile_image=user.profile_image,
            role=user.role.value,
            created_at=user.created_at or now,
            updated_at=user.updated_at or now,
            deleted_at=user.deleted_at,
        )

    def _model_to_domain(self, model: UserModel) -> User:
        return User(
            id=model.id,
            full_name=model.full_name,
            email=model.email,
            password_hash=model.password_hash,
            phone=model.phone,
            location=model.location,
            bio=model.bio,
            profile_image=model.profile_image,
            role=model.role,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

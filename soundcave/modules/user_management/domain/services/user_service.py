# 📄 File: soundcave/modules/user_management/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# Business rules for managing accounts: admins creating and removing accounts, and
# people updating their own details.
# 🧪 Purpose (Technical Summary):
# Domain service implementing account CRUD with ownership and role rules, owning the
# transaction boundary for each write.
# 🔗 Dependencies:
# User domain model, UserRepository, PasswordHasher, role parser
# 🔄 Connected Modules / Calls From:
# Users API endpoints

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.core.exceptions import AuthorizationError, NotFoundError
from soundcave.shared.core.roles import ADMIN_ASSIGNABLE_ROLES, Role, parse_role
from soundcave.shared.core.security import Identity, PasswordHasher

from ..models.user import User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("full_name", "email", "phone", "location", "bio", "profile_image")


class UserService:
    """
    Domain service for account management.

    This is a domain service used for business logic only; endpoints
    return schemas built from the User it yields.
    """

    def __init__(
        self,
        session: AsyncSession,
        user_repository: UserRepository,
        password_hasher: PasswordHasher
    ):
        self._session = session
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    # =========================================================================
    # ADMIN OPERATIONS
    # =========================================================================

    async def create_user(
        self,
        full_name: str,
        email: str,
        password: str,
        role: Any = Role.USER,
        phone: Optional[str] = None,
        location: Optional[str] = None,
        bio: Optional[str] = None,
        profile_image: Optional[str] = None
    ) -> User:
        """
        Create an account directly (admin only at the API layer).

        Raises:
            ValidationError: If the role is not one an admin may assign
            ConflictError: If the email already exists
        """
        user = User(
            full_name=full_name.strip(),
            email=email,
            password_hash=self.password_hasher.hash(password),
            role=parse_role(role, allowed=ADMIN_ASSIGNABLE_ROLES),
            phone=phone,
            location=location,
            bio=bio,
            profile_image=profile_image,
        )
        created = await self.user_repository.create(user)
        await self._session.commit()
        logger.info(f"Admin created user {created.id} with role {created.role.value}")
        return created

    async def list_users(
        self,
        offset: int,
        limit: int,
        role: Optional[str] = None,
        search: Optional[str] = None
    ) -> Tuple[List[User], int]:
        role_filter = parse_role(role) if role else None
        return await self.user_repository.list_users(
            offset=offset, limit=limit, role=role_filter, search=search
        )

    async def get_user(self, user_id: int) -> User:
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
        return user

    async def update_user(self, actor: Identity, user_id: int, changes: Dict[str, Any]) -> User:
        """
        Apply ``changes`` to an account.

        Business rules:
        - Callers may update themselves; admins may update anyone
        - Only admins may change a role

        Raises:
            AuthorizationError: If the caller is neither the owner nor an admin
            NotFoundError: If the account does not exist
        """
        if actor.id != user_id and not actor.is_admin():
            raise AuthorizationError(
                "You can only update your own account",
                actual_role=actor.role.value,
                reason="not_owner",
            )

        user = await self.get_user(user_id)

        for field in UPDATABLE_FIELDS:
            if field in changes and changes[field] is not None:
                setattr(user, field, changes[field])

        if changes.get("password"):
            user.password_hash = self.password_hasher.hash(changes["password"])

        if changes.get("role") is not None:
            new_role = parse_role(changes["role"])
            if new_role != user.role:
                if not actor.is_admin():
                    raise AuthorizationError(
                        "Only admins can change roles",
                        required_role=Role.ADMIN.value,
                        actual_role=actor.role.value,
                    )
                user.role = new_role

        user.touch()
        updated = await self.user_repository.update(user)
        await self._session.commit()
        logger.info(f"User {user_id} updated by {actor.id}")
        return updated

    async def delete_user(self, user_id: int) -> None:
        """Soft delete an account. Raises NotFoundError when absent."""
        deleted = await self.user_repository.soft_delete(user_id)
        if not deleted:
            raise NotFoundError("User not found", resource_type="user", resource_id=user_id)
        await self._session.commit()

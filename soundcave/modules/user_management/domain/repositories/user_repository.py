# 📄 File: soundcave/modules/user_management/domain/repositories/user_repository.py
# 🧭 Purpose (Layman Explanation):
# Describes how accounts are saved, found, changed and removed, without saying which
# database does the work.
# 🧪 Purpose (Technical Summary):
# Repository interface for User entities following the Repository pattern and
# dependency inversion principle.
# 🔗 Dependencies:
# Domain models (User), typing, abc
# 🔄 Connected Modules / Calls From:
# Domain services (auth, users, follows), infrastructure implementation

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from soundcave.shared.core.roles import Role

from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (User), not database models
    - Soft-deleted users are invisible unless ``include_deleted`` is set
    - Implementations flush but never commit; services own the transaction
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Raises:
            ConflictError: If a user with the same email already exists
        """

    @abstractmethod
    async def get_by_id(
        self,
        user_id: int,
        include_deleted: bool = False,
        for_update: bool = False
    ) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID to find
            include_deleted: Also return soft-deleted users
            for_update: Lock the row for the rest of the transaction

        Returns:
            User entity if found, None otherwise
        """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get an active user by email address (case-insensitive)."""

    @abstractmethod
    async def list_users(
        self,
        offset: int = 0,
        limit: int = 10,
        role: Optional[Role] = None,
        search: Optional[str] = None
    ) -> Tuple[List[User], int]:
        """
        List active users ordered by newest first.

        Returns:
            (page of users, total matching count)
        """

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Persist changes to an existing user.

        Raises:
            NotFoundError: If the user does not exist
            ConflictError: If the new email is taken
        """

    @abstractmethod
    async def soft_delete(self, user_id: int) -> bool:
        """Mark the user deleted; False when no active user matched."""

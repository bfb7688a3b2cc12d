"""
Common FastAPI dependencies for the SoundCave application.
Provides the access control guard, role gates, pagination, and injected
infrastructure clients (token service, password hasher, object storage).
"""

import logging
from typing import Dict, Iterable, Optional

from fastapi import Depends, Query, Request
from fastapi.security import APIKeyHeader

from ..infrastructure.storage.supabase_storage import ObjectStorage
from ..utils.logging import bind_user_id
from .exceptions import AuthorizationError, FileStorageError
from .roles import Role
from .security import Identity, PasswordHasher, TokenService
from .security import require_role as check_role

logger = logging.getLogger(__name__)

# Raw header access so malformed values can be told apart from missing ones
authorization_header = APIKeyHeader(
    name="Authorization",
    auto_error=False,
    description="Bearer token: 'Bearer <token>'",
)


# =============================================================================
# INFRASTRUCTURE CLIENTS
# =============================================================================

def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_storage_client(request: Request) -> ObjectStorage:
    """
    Object storage client owned by the application lifespan.

    Raises:
        FileStorageError: If storage is not configured for this deployment
    """
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        raise FileStorageError("Object storage is not configured", operation="resolve_client")
    return storage


def get_optional_storage_client(request: Request) -> Optional[ObjectStorage]:
    """Storage client, or None when storage is not configured."""
    return getattr(request.app.state, "storage", None)


# =============================================================================
# ACCESS CONTROL GUARD
# =============================================================================

async def get_current_identity(
    request: Request,
    authorization: Optional[str] = Depends(authorization_header),
    token_service: TokenService = Depends(get_token_service),
) -> Identity:
    """
    Resolve the caller from the Authorization header.

    The identity is attached to ``request.state.identity`` and the logging
    context. No database lookup is performed.

    Raises:
        AuthenticationError: For missing, malformed, expired or invalid credentials
    """
    cached = getattr(request.state, "identity", None)
    if cached is not None:
        return cached

    identity = token_service.validate_credential(authorization)
    request.state.identity = identity
    bind_user_id(str(identity.id))
    logger.debug(f"Authenticated user {identity.id} with role {identity.role.value}")
    return identity


def require_role(required_role: Role):
    """
    Dependency factory for role-based authorization.

    Args:
        required_role: Role the caller must hold exactly

    Returns:
        function: Dependency function
    """
    async def role_dependency(
        identity: Identity = Depends(get_current_identity)
    ) -> Identity:
        check_role(identity, required_role)
        return identity

    return role_dependency


def require_any_role(required_roles: Iterable[Role]):
    """
    Dependency factory for multiple role authorization.

    Args:
        required_roles: Acceptable roles

    Returns:
        function: Dependency function
    """
    allowed = frozenset(required_roles)

    async def role_dependency(
        identity: Identity = Depends(get_current_identity)
    ) -> Identity:
        if identity.role not in allowed:
            names = sorted(role.value for role in allowed)
            logger.warning(f"User {identity.id} lacks any required roles: {names}")
            raise AuthorizationError(
                f"Access denied. Required roles: {', '.join(names)}",
                required_role=",".join(names),
                actual_role=identity.role.value,
            )
        return identity

    return role_dependency


# =============================================================================
# PAGINATION
# =============================================================================

class PaginationParams:
    """Page-based pagination parameters for list endpoints."""

    def __init__(self, page: int = 1, limit: int = 10, max_limit: int = 100):
        self.page = max(1, page)
        self.limit = min(max(1, limit), max_limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def meta(self, total: int) -> Dict[str, int]:
        """Pagination block returned alongside list results."""
        total_pages = (total + self.limit - 1) // self.limit
        return {
            "page": self.page,
            "limit": self.limit,
            "total": total,
            "total_pages": total_pages,
        }


def get_pagination_params(
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    limit: int = Query(10, ge=1, le=100, description="Items per page"),
) -> PaginationParams:
    return PaginationParams(page=page, limit=limit)

# 📄 File: soundcave/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Wires together the pieces the account endpoints need (database session, password
# hashing, token signing, Google verification) for each request.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependency providers building repositories and domain
# services from the per-request session and app-scoped clients on app.state.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy AsyncSession, soundcave.shared.core.dependencies
# 🔄 Connected Modules / Calls From:
# auth.py, users.py endpoints; social follow dependencies (user repository)

from typing import Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.config.database import get_db
from soundcave.shared.core.dependencies import get_password_hasher, get_token_service
from soundcave.shared.core.security import PasswordHasher, TokenService

from ..domain.repositories.user_repository import UserRepository
from ..domain.services.auth_service import AuthService
from ..domain.services.user_service import UserService
from ..infrastructure.database.user_repository_impl import UserRepositoryImpl
from ..infrastructure.external.google_identity import GoogleIdentityVerifier


def get_google_verifier(request: Request) -> Optional[GoogleIdentityVerifier]:
    return getattr(request.app.state, "google_verifier", None)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    return UserRepositoryImpl(db)


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    user_repository: UserRepository = Depends(get_user_repository),
    token_service: TokenService = Depends(get_token_service),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    google_verifier: Optional[GoogleIdentityVerifier] = Depends(get_google_verifier),
) -> AuthService:
    return AuthService(
        session=db,
        user_repository=user_repository,
        token_service=token_service,
        password_hasher=password_hasher,
        google_verifier=google_verifier,
    )


def get_user_service(
    db: AsyncSession = Depends(get_db),
    user_repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserService:
    return UserService(session=db, user_repository=user_repository, password_hasher=password_hasher)

# 📄 File: soundcave/modules/user_management/domain/services/auth_service.py
# 🧭 Purpose (Layman Explanation):
# Handles signing up, logging in with email and password, logging in with Google,
# and looking up the signed-in person's own profile.
# 🧪 Purpose (Technical Summary):
# Domain service implementing credential verification and token issuance on top of the
# user repository, the TokenService, the PasswordHasher and the Google verifier.
# 🔗 Dependencies:
# Domain models, repositories, soundcave.shared.core.security, google_identity
# 🔄 Connected Modules / Calls From:
# Auth API endpoints (/auth/register, /auth/login, /auth/google, /profile)

import logging
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from soundcave.shared.core.exceptions import AuthenticationError, NotFoundError
from soundcave.shared.core.roles import Role
from soundcave.shared.core.security import Identity, PasswordHasher, TokenService

from ...infrastructure.external.google_identity import GoogleIdentityVerifier
from ..models.user import User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)

INVALID_LOGIN_MESSAGE = "Invalid email or password"


class AuthService:
    """
    Domain service for authentication.

    Business rules:
    - Self-registration always creates a ``user`` role account
    - Unknown email, wrong password and password-less accounts fail the same way
    - Google sign-in creates a password-less account on first use
    """

    def __init__(
        self,
        session: AsyncSession,
        user_repository: UserRepository,
        token_service: TokenService,
        password_hasher: PasswordHasher,
        google_verifier: Optional[GoogleIdentityVerifier] = None
    ):
        self._session = session
        self.user_repository = user_repository
        self.token_service = token_service
        self.password_hasher = password_hasher
        self.google_verifier = google_verifier

    async def register(
        self,
        full_name: str,
        email: str,
        password: str,
        phone: Optional[str] = None,
        location: Optional[str] = None,
        bio: Optional[str] = None
    ) -> Tuple[User, str]:
        """
        Register a listener account and sign it in.

        Returns:
            Tuple of (created User, access token)

        Raises:
            ConflictError: If the email is already registered
        """
        logger.info(f"Registering user: {email}")
        user = User(
            full_name=full_name.strip(),
            email=email,
            password_hash=self.password_hasher.hash(password),
            phone=phone,
            location=location,
            bio=bio,
            role=Role.USER,
        )
        created = await self.user_repository.create(user)
        await self._session.commit()

        return created, self._issue(created)

    async def login(self, email: str, password: str) -> Tuple[User, str]:
        """
        Authenticate with email and password.

        Raises:
            AuthenticationError: For any credential mismatch
        """
        user = await self.user_repository.get_by_email(email)

        if user is None:
            logger.info(f"Login failed - unknown email: {email}")
            raise AuthenticationError(INVALID_LOGIN_MESSAGE)

        if not user.has_password:
            logger.info(f"Login failed - account {user.id} has no password")
            raise AuthenticationError(INVALID_LOGIN_MESSAGE)

        if not self.password_hasher.verify(password, user.password_hash):
            logger.info(f"Login failed - wrong password for user {user.id}")
            raise AuthenticationError(INVALID_LOGIN_MESSAGE)

        logger.info(f"User logged in: {user.id}")
        return user, self._issue(user)

    async def google_sign_in(self, id_token: str) -> Tuple[User, str, bool]:
        """
        Sign in with a Google ID token.

        Returns:
            Tuple of (User, access token, created flag)

        Raises:
            AuthenticationError: If Google rejects the token
            ExternalServiceError: If Google cannot be reached
        """
        if self.google_verifier is None:
            raise AuthenticationError("Google sign-in is not available", cause="verifier_missing")

        profile = await self.google_verifier.verify(id_token)
        user = await self.user_repository.get_by_email(profile.email)
        created = user is None

        if user is None:
            user = await self.user_repository.create(
                User(
                    full_name=profile.full_name,
                    email=profile.email,
                    profile_image=profile.picture,
                    role=Role.USER,
                )
            )
            logger.info(f"Created Google account for: {profile.email}")
        else:
            user.full_name = profile.full_name
            if profile.picture:
                user.profile_image = profile.picture
            user.touch()
            user = await self.user_repository.update(user)

        await self._session.commit()
        return user, self._issue(user), created

    async def get_profile(self, identity: Identity) -> User:
        """
        Load the stored account behind a validated identity.

        Raises:
            NotFoundError: If the account was deleted after the token was issued
        """
        user = await self.user_repository.get_by_id(identity.id)
        if user is None:
            raise NotFoundError("User not found", resource_type="user", resource_id=identity.id)
        return user

    def _issue(self, user: User) -> str:
        return self.token_service.issue_token(user.id, user.email, user.role)

"""
Security utilities for bearer token issuance and validation and password hashing.

The token is an HS256-signed JWT carrying ``user_id``, ``email`` and ``role``
together with ``iat``/``nbf``/``exp``. Validation is purely cryptographic;
the role embedded at issuance is trusted for the token's lifetime.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import ExpiredSignatureError, JOSEError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel

from ..config.settings import Settings, get_settings
from .exceptions import AuthenticationError, AuthorizationError, InternalError, ValidationError
from .roles import Role, parse_role

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"

REQUIRED_CLAIMS = ("user_id", "email", "role", "iat", "nbf", "exp")


class Identity(BaseModel):
    """Caller identity resolved from a validated token."""
    id: int
    email: str
    role: Role

    def has_role(self, role: Role) -> bool:
        return self.role == role

    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class TokenService:
    """
    Issues and validates signed, time-bound bearer tokens.
    """

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self.secret_key = settings.JWT_SECRET_KEY
        self.algorithm = settings.JWT_ALGORITHM
        self.validity = timedelta(days=settings.JWT_TOKEN_VALIDITY_DAYS)

    def issue_token(
        self,
        user_id: int,
        email: str,
        role: Role,
        now: Optional[datetime] = None
    ) -> str:
        """
        Create a signed token for an identity.

        Args:
            user_id: Identity primary key
            email: Email label carried in the token
            role: Role at issuance time
            now: Issuance instant; defaults to the current UTC time

        Returns:
            str: Encoded JWT

        Raises:
            InternalError: If signing fails
        """
        issued_at = now or datetime.now(timezone.utc)
        if issued_at.tzinfo is None:
            issued_at = issued_at.replace(tzinfo=timezone.utc)
        iat = int(issued_at.timestamp())

        claims = {
            "user_id": user_id,
            "email": email,
            "role": parse_role(role).value,
            "iat": iat,
            "nbf": iat,
            "exp": iat + int(self.validity.total_seconds()),
        }

        try:
            token = jwt.encode(claims, self.secret_key, algorithm=self.algorithm)
        except JOSEError as e:
            logger.error(f"Failed to sign token for user {user_id}: {e}")
            raise InternalError() from e

        logger.debug(f"Token issued for user: {user_id}")
        return token

    def decode_token(self, token: str) -> Identity:
        """
        Verify signature and validity window and return the identity.

        Raises:
            AuthenticationError: expired_credential or invalid_credential
        """
        try:
            payload: Dict[str, Any] = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require_iat": True, "require_nbf": True, "require_exp": True},
            )
        except ExpiredSignatureError as e:
            logger.info("Rejected expired token")
            raise AuthenticationError(
                "Token has expired",
                reason=AuthenticationError.EXPIRED_CREDENTIAL,
                cause=str(e),
            ) from e
        except JWTError as e:
            logger.info(f"Rejected invalid token: {e}")
            raise AuthenticationError(
                "Invalid token",
                reason=AuthenticationError.INVALID_CREDENTIAL,
                cause=str(e),
            ) from e

        missing = [claim for claim in REQUIRED_CLAIMS if claim not in payload]
        if missing:
            raise AuthenticationError(
                "Invalid token",
                reason=AuthenticationError.INVALID_CREDENTIAL,
                cause=f"missing claims: {', '.join(missing)}",
            )

        try:
            role = parse_role(payload["role"])
            return Identity(id=int(payload["user_id"]), email=str(payload["email"]), role=role)
        except (ValidationError, TypeError, ValueError) as e:
            raise AuthenticationError(
                "Invalid token",
                reason=AuthenticationError.INVALID_CREDENTIAL,
                cause=f"malformed claims: {e}",
            ) from e

    def validate_credential(self, header: Optional[str]) -> Identity:
        """
        Validate an Authorization header value of the form ``Bearer <token>``.

        Args:
            header: Raw header value, or None when the header is absent

        Returns:
            Identity: The resolved caller

        Raises:
            AuthenticationError: missing, malformed, expired or invalid credential
        """
        if header is None or not header.strip():
            raise AuthenticationError(
                "Authorization header is required",
                reason=AuthenticationError.MISSING_CREDENTIAL,
            )

        parts = header.split()
        if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
            raise AuthenticationError(
                "Authorization header must be 'Bearer <token>'",
                reason=AuthenticationError.MALFORMED_CREDENTIAL,
            )

        return self.decode_token(parts[1])


class PasswordHasher:
    """bcrypt password hashing via passlib."""

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=settings.BCRYPT_ROUNDS,
        )

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: Optional[str]) -> bool:
        """Return False for accounts without a password (third-party sign-in)."""
        if not hashed_password:
            return False
        try:
            return self._context.verify(plain_password, hashed_password)
        except ValueError as e:
            logger.warning(f"Stored password hash is unreadable: {e}")
            return False


def require_role(identity: Identity, role: Role) -> None:
    """
    Raise AuthorizationError unless the identity holds exactly ``role``.
    """
    if not identity.has_role(role):
        logger.warning(f"User {identity.id} with role {identity.role.value} lacks required role: {role.value}")
        raise AuthorizationError(
            f"Access denied. Required role: {role.value}",
            required_role=role.value,
            actual_role=identity.role.value,
        )

"""
Unit tests for token issuance, credential validation, role checks and the
signing-secret startup guard.
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt
from pydantic import ValidationError as PydanticValidationError

from soundcave.shared.config.settings import DEVELOPMENT_JWT_SECRET, Settings
from soundcave.shared.core.exceptions import AuthenticationError, AuthorizationError, InternalError, ValidationError
from soundcave.shared.core.roles import ADMIN_ASSIGNABLE_ROLES, Role, parse_role
from soundcave.shared.core.security import Identity, PasswordHasher, TokenService, require_role

SECRET = "unit-test-secret"


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(Settings(ENVIRONMENT="test", JWT_SECRET_KEY=SECRET, JWT_TOKEN_VALIDITY_DAYS=30))


# =============================================================================
# TOKENS
# =============================================================================

def test_issued_token_round_trips(token_service):
    token = token_service.issue_token(42, "fan@example.com", Role.USER)

    identity = token_service.validate_credential(f"Bearer {token}")

    assert identity == Identity(id=42, email="fan@example.com", role=Role.USER)


def test_token_carries_thirty_day_window(token_service):
    issued_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
    token = token_service.issue_token(7, "label@example.com", Role.LABEL, now=issued_at)

    claims = jwt.get_unverified_claims(token)

    assert claims["role"] == "label"
    assert claims["iat"] == claims["nbf"] == int(issued_at.timestamp())
    assert claims["exp"] - claims["iat"] == 30 * 24 * 3600


def test_expired_token_is_rejected(token_service):
    issued_at = datetime.now(timezone.utc) - timedelta(days=31)
    token = token_service.issue_token(42, "fan@example.com", Role.USER, now=issued_at)

    with pytest.raises(AuthenticationError) as exc_info:
        token_service.validate_credential(f"Bearer {token}")

    assert exc_info.value.reason == AuthenticationError.EXPIRED_CREDENTIAL


def test_token_signed_with_other_secret_is_invalid(token_service):
    other = TokenService(Settings(ENVIRONMENT="test", JWT_SECRET_KEY="someone-else"))
    token = other.issue_token(42, "fan@example.com", Role.USER)

    with pytest.raises(AuthenticationError) as exc_info:
        token_service.validate_credential(f"Bearer {token}")

    assert exc_info.value.reason == AuthenticationError.INVALID_CREDENTIAL


def test_token_with_unknown_role_is_invalid(token_service):
    now = int(datetime.now(timezone.utc).timestamp())
    token = jwt.encode(
        {"user_id": 1, "email": "x@example.com", "role": "superuser", "iat": now, "nbf": now, "exp": now + 60},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(AuthenticationError) as exc_info:
        token_service.validate_credential(f"Bearer {token}")

    assert exc_info.value.reason == AuthenticationError.INVALID_CREDENTIAL


def test_token_missing_claims_is_invalid(token_service):
    token = jwt.encode({"user_id": 1, "role": "user"}, SECRET, algorithm="HS256")

    with pytest.raises(AuthenticationError) as exc_info:
        token_service.decode_token(token)

    assert exc_info.value.reason == AuthenticationError.INVALID_CREDENTIAL


def test_token_not_yet_valid_is_rejected(token_service):
    issued_at = datetime.now(timezone.utc) + timedelta(hours=1)
    token = token_service.issue_token(42, "fan@example.com", Role.USER, now=issued_at)

    with pytest.raises(AuthenticationError) as exc_info:
        token_service.validate_credential(f"Bearer {token}")

    assert exc_info.value.reason == AuthenticationError.INVALID_CREDENTIAL


@pytest.mark.parametrize("algorithm", ["XX999", "RS256"])
def test_signing_failure_is_internal_error(token_service, algorithm):
    # An unknown algorithm, or an RSA algorithm given a shared secret
    token_service.algorithm = algorithm

    with pytest.raises(InternalError):
        token_service.issue_token(42, "fan@example.com", Role.USER)


@pytest.mark.parametrize("header", [None, "", "   "])
def test_missing_credential(token_service, header):
    with pytest.raises(AuthenticationError) as exc_info:
        token_service.validate_credential(header)

    assert exc_info.value.reason == AuthenticationError.MISSING_CREDENTIAL


@pytest.mark.parametrize("header", ["Token abc", "Bearer", "Bearer a b", "abc.def.ghi"])
def test_malformed_credential(token_service, header):
    with pytest.raises(AuthenticationError) as exc_info:
        token_service.validate_credential(header)

    assert exc_info.value.reason == AuthenticationError.MALFORMED_CREDENTIAL


def test_bearer_scheme_is_case_insensitive(token_service):
    token = token_service.issue_token(5, "a@example.com", Role.ADMIN)

    assert token_service.validate_credential(f"bearer {token}").role == Role.ADMIN


# =============================================================================
# ROLES
# =============================================================================

def test_require_role_accepts_exact_role():
    require_role(Identity(id=1, email="a@example.com", role=Role.ADMIN), Role.ADMIN)


def test_require_role_rejects_other_role():
    with pytest.raises(AuthorizationError) as exc_info:
        require_role(Identity(id=1, email="a@example.com", role=Role.PREMIUM), Role.ADMIN)

    assert exc_info.value.status_code == 403
    assert exc_info.value.details["actual_role"] == "premium"


def test_parse_role_normalizes_case():
    assert parse_role(" Independent ") == Role.INDEPENDENT


def test_parse_role_rejects_unknown_and_disallowed():
    with pytest.raises(ValidationError):
        parse_role("superuser")
    with pytest.raises(ValidationError):
        parse_role("label", allowed=ADMIN_ASSIGNABLE_ROLES)


# =============================================================================
# PASSWORDS AND SETTINGS
# =============================================================================

def test_password_hasher_verifies_and_rejects():
    hasher = PasswordHasher(Settings(ENVIRONMENT="test", BCRYPT_ROUNDS=4))
    hashed = hasher.hash("secret123")

    assert hasher.verify("secret123", hashed)
    assert not hasher.verify("wrong", hashed)
    assert not hasher.verify("secret123", None)


@pytest.mark.parametrize("environment", ["staging", "production"])
def test_deployed_environment_refuses_default_secret(environment):
    with pytest.raises(PydanticValidationError):
        Settings(ENVIRONMENT=environment, JWT_SECRET_KEY=DEVELOPMENT_JWT_SECRET)


def test_deployed_environment_accepts_private_secret():
    settings = Settings(ENVIRONMENT="production", JWT_SECRET_KEY="a-long-private-signing-key")

    assert settings.is_production

"""
HTTP tests for registration, login, Google sign-in, profile lookup and the
access control guard.
"""

from datetime import datetime, timedelta, timezone

from conftest import auth_header

from soundcave.modules.user_management.infrastructure.external.google_identity import GoogleProfile
from soundcave.shared.core.roles import Role


async def test_register_returns_token_for_listener(client):
    response = await client.post(
        "/api/v1/auth/register",
        json={"full_name": "Ayu Lestari", "email": "Ayu@Example.com", "password": "secret123"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "ayu@example.com"
    assert body["user"]["role"] == "user"

    profile = await client.get("/api/v1/profile", headers=auth_header(body["token"]))
    assert profile.status_code == 200
    assert profile.json()["data"]["full_name"] == "Ayu Lestari"


async def test_register_duplicate_email_conflicts(client):
    payload = {"full_name": "Dup", "email": "dup@example.com", "password": "secret123"}
    assert (await client.post("/api/v1/auth/register", json=payload)).status_code == 201

    response = await client.post("/api/v1/auth/register", json=payload)

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


async def test_register_short_password_is_validation_error(client):
    response = await client.post(
        "/api/v1/auth/register",
        json={"full_name": "Short", "email": "short@example.com", "password": "123"},
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_login_success(client, make_user):
    await make_user(email="listener@example.com", password="hunter22")

    response = await client.post(
        "/api/v1/auth/login", json={"email": "listener@example.com", "password": "hunter22"}
    )

    assert response.status_code == 200
    assert response.json()["token"]


async def test_login_failures_share_one_message(client, make_user):
    await make_user(email="listener@example.com", password="hunter22")

    wrong_password = await client.post(
        "/api/v1/auth/login", json={"email": "listener@example.com", "password": "nope"}
    )
    unknown_email = await client.post(
        "/api/v1/auth/login", json={"email": "nobody@example.com", "password": "hunter22"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json()["error"]["message"] == unknown_email.json()["error"]["message"]
    assert wrong_password.json()["error"]["details"] == unknown_email.json()["error"]["details"]


async def test_google_sign_in_creates_then_reuses_account(client, google_verifier):
    google_verifier.profiles["good-token"] = GoogleProfile(
        subject="1234", email="g@example.com", full_name="Gita", picture="https://img.example.com/g.png"
    )

    first = await client.post("/api/v1/auth/google", json={"id_token": "good-token"})
    second = await client.post("/api/v1/auth/google", json={"id_token": "good-token"})

    assert first.status_code == 201
    assert second.status_code == 200
    assert first.json()["user"]["id"] == second.json()["user"]["id"]
    assert second.json()["user"]["profile_image"] == "https://img.example.com/g.png"


async def test_google_sign_in_rejected_token(client):
    response = await client.post("/api/v1/auth/google", json={"id_token": "forged"})

    assert response.status_code == 401


# =============================================================================
# ACCESS CONTROL GUARD OVER HTTP
# =============================================================================

async def test_missing_credential_is_401(client):
    response = await client.get("/api/v1/profile")

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json()["error"]["details"]["reason"] == "missing_credential"


async def test_malformed_credential_is_401(client):
    response = await client.get("/api/v1/profile", headers={"Authorization": "Token abc"})

    assert response.status_code == 401
    assert response.json()["error"]["details"]["reason"] == "malformed_credential"


async def test_expired_credential_is_401(app, client, make_user):
    user, _ = await make_user()
    stale = app.state.token_service.issue_token(
        user.id, user.email, user.role, now=datetime.now(timezone.utc) - timedelta(days=40)
    )

    response = await client.get("/api/v1/profile", headers=auth_header(stale))

    assert response.status_code == 401
    assert response.json()["error"]["details"]["reason"] == "expired_credential"


async def test_invalid_credential_is_401(client):
    response = await client.get("/api/v1/profile", headers=auth_header("not.a.jwt"))

    assert response.status_code == 401
    assert response.json()["error"]["details"]["reason"] == "invalid_credential"


async def test_role_gate_forbids_non_admin(client, make_user):
    _, token = await make_user(role=Role.PREMIUM)

    response = await client.get("/api/v1/users", headers=auth_header(token))

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


async def test_profile_of_deleted_account_is_404(client, make_user):
    _, admin_token = await make_user(role=Role.ADMIN)
    user, token = await make_user()

    assert (await client.delete(f"/api/v1/users/{user.id}", headers=auth_header(admin_token))).status_code == 200

    response = await client.get("/api/v1/profile", headers=auth_header(token))
    assert response.status_code == 404

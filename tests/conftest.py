"""
Shared pytest fixtures for the SoundCave test suite.

Each test gets its own SQLite file database, an application built with
``ENVIRONMENT=test`` settings, an in-memory storage client and a stub Google
verifier, all injected through ``app.dependency_overrides``.
"""

import io
import itertools
from typing import Any, Dict, List, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from PIL import Image as PILImage

from soundcave.main import create_application
from soundcave.modules.catalog.domain.models.artist import Artist
from soundcave.modules.catalog.infrastructure.database.artist_repository_impl import ArtistRepositoryImpl
from soundcave.modules.user_management.domain.models.user import User
from soundcave.modules.user_management.infrastructure.database.models import UserModel
from soundcave.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from soundcave.modules.user_management.infrastructure.external.google_identity import GoogleProfile
from soundcave.modules.user_management.presentation.dependencies import get_google_verifier
from soundcave.shared.config.settings import Settings, get_settings
from soundcave.shared.core.dependencies import get_optional_storage_client, get_storage_client
from soundcave.shared.core.exceptions import AuthenticationError
from soundcave.shared.core.roles import Role
from soundcave.shared.infrastructure.storage.supabase_storage import ObjectStorage

TEST_JWT_SECRET = "soundcave-test-signing-key"


# =============================================================================
# FAKES
# =============================================================================

class FakeStorage(ObjectStorage):
    """In-memory object storage."""

    def __init__(self):
        self.objects: Dict[str, bytes] = {}
        self.deleted: List[str] = []

    async def upload_file(self, data: bytes, path: str, content_type: str) -> Dict[str, Any]:
        self.objects[path] = data
        return {"path": path, "public_url": await self.get_public_url(path), "file_size": len(data)}

    async def delete_file(self, path: str) -> bool:
        self.deleted.append(path)
        return self.objects.pop(path, None) is not None

    async def get_public_url(self, path: str) -> str:
        return f"https://storage.example.com/soundcave/{path}"

    async def close(self) -> None:
        self.objects.clear()


class FakeGoogleVerifier:
    """Accepts tokens registered in ``profiles`` and rejects everything else."""

    def __init__(self):
        self.profiles: Dict[str, GoogleProfile] = {}

    async def verify(self, id_token: str) -> GoogleProfile:
        if id_token not in self.profiles:
            raise AuthenticationError("Google rejected the ID token", cause="invalid_google_token")
        return self.profiles[id_token]


# =============================================================================
# APPLICATION
# =============================================================================

@pytest.fixture
def settings(tmp_path, monkeypatch) -> Settings:
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("JWT_SECRET_KEY", TEST_JWT_SECRET)
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "false")
    get_settings.cache_clear()

    yield Settings(
        ENVIRONMENT="test",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'soundcave.db'}",
        JWT_SECRET_KEY=TEST_JWT_SECRET,
        BCRYPT_ROUNDS=4,
        RATE_LIMIT_ENABLED=False,
        LOG_FORMAT="text",
        SUPABASE_URL=None,
        SUPABASE_SERVICE_ROLE_KEY=None,
        GOOGLE_CLIENT_ID="soundcave-test.apps.googleusercontent.com",
    )

    get_settings.cache_clear()


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def google_verifier() -> FakeGoogleVerifier:
    return FakeGoogleVerifier()


@pytest.fixture
async def app(settings, storage, google_verifier):
    application = create_application(settings)
    await application.state.database.create_all()

    application.dependency_overrides[get_storage_client] = lambda: storage
    application.dependency_overrides[get_optional_storage_client] = lambda: storage
    application.dependency_overrides[get_google_verifier] = lambda: google_verifier

    yield application

    application.dependency_overrides.clear()
    await application.state.database.dispose()


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session(app):
    async with app.state.database.session_factory() as session:
        yield session


# =============================================================================
# DATA FACTORIES
# =============================================================================

def auth_header(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(app):
    """
    Insert an account and return ``(user, token)``.

    An explicit ``user_id`` lets scenarios use fixed identities.
    """
    counter = itertools.count(1)

    async def _make_user(
        role: Role = Role.USER,
        user_id: Optional[int] = None,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        password: str = "secret123",
    ):
        n = next(counter)
        async with app.state.database.session_factory() as session:
            model = UserModel(
                id=user_id,
                full_name=full_name or f"Account {n}",
                email=(email or f"account{n}-{role.value}@example.com").lower(),
                password_hash=app.state.password_hasher.hash(password),
                role=role.value,
            )
            session.add(model)
            await session.commit()
            user: User = await UserRepositoryImpl(session).get_by_id(model.id)

        token = app.state.token_service.issue_token(user.id, user.email, user.role)
        return user, token

    return _make_user


@pytest.fixture
def make_artist(app):
    """Insert an artist page and return it."""
    counter = itertools.count(1)

    async def _make_artist(name: Optional[str] = None, ref_user_id: Optional[int] = None) -> Artist:
        n = next(counter)
        async with app.state.database.session_factory() as session:
            artist = await ArtistRepositoryImpl(session).create(
                Artist(
                    name=name or f"Artist {n}",
                    bio="Plays loud guitars",
                    genre="Rock",
                    country="Indonesia",
                    email=f"artist{n}@example.com",
                    ref_user_id=ref_user_id,
                )
            )
            await session.commit()
        return artist

    return _make_artist


def png_bytes(size=(8, 8), color=(200, 30, 30)) -> bytes:
    """A small valid PNG."""
    buffer = io.BytesIO()
    PILImage.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()

"""
Artist and music catalog endpoint tests.
"""

import pytest
from conftest import auth_header

from soundcave.modules.catalog.domain.models.artist import Artist
from soundcave.modules.catalog.infrastructure.database.artist_repository_impl import ArtistRepositoryImpl
from soundcave.shared.core.exceptions import ConflictError
from soundcave.shared.core.roles import Role


def music_payload(artist_id: int, **overrides):
    payload = {
        "title": "Gua Hantu",
        "artist": "The Cave",
        "artist_id": artist_id,
        "album": "Stalactites",
        "genre": "Rock",
        "release_date": "2025-03-01",
        "duration": "03:45",
        "language": "Indonesian",
        "explicit": False,
        "audio_file_url": "https://storage.example.com/soundcave/musics/gua-hantu.mp3",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def editor(make_user):
    """A label account as ``(user, token)``."""
    return await make_user(role=Role.LABEL)


@pytest.fixture
def editor_token(editor):
    return editor[1]


@pytest.fixture
async def owned_artist(editor, make_artist):
    user, _ = editor
    return await make_artist(name="The Cave", ref_user_id=user.id)


# =============================================================================
# ARTISTS
# =============================================================================

async def test_artist_crud(client, editor_token):
    headers = auth_header(editor_token)

    created = await client.post(
        "/api/v1/artists",
        json={
            "name": "The Cave",
            "bio": "Echoes",
            "genre": "Rock",
            "country": "Indonesia",
            "debut_year": "2019",
            "email": "cave@example.com",
            "social_media": {"instagram": "@thecave"},
        },
        headers=headers,
    )
    assert created.status_code == 201
    artist = created.json()["data"]
    assert artist["total_follower"] == 0
    assert artist["social_media"] == {"instagram": "@thecave"}

    updated = await client.put(
        f"/api/v1/artists/{artist['id']}", json={"country": "Malaysia"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["country"] == "Malaysia"
    assert updated.json()["data"]["name"] == "The Cave"

    listing = await client.get("/api/v1/artists", params={"search": "cave"})
    assert listing.json()["pagination"]["total"] == 1

    assert (await client.delete(f"/api/v1/artists/{artist['id']}", headers=headers)).status_code == 200
    assert (await client.get(f"/api/v1/artists/{artist['id']}")).status_code == 404


async def test_artist_email_must_be_unique(client, editor_token):
    headers = auth_header(editor_token)
    body = {"name": "One", "email": "same@example.com"}
    assert (await client.post("/api/v1/artists", json=body, headers=headers)).status_code == 201

    response = await client.post("/api/v1/artists", json={**body, "name": "Two"}, headers=headers)

    assert response.status_code == 409


async def test_listener_cannot_create_artist(client, make_user):
    _, token = await make_user(role=Role.USER)

    response = await client.post(
        "/api/v1/artists", json={"name": "Nope", "email": "nope@example.com"}, headers=auth_header(token)
    )

    assert response.status_code == 403


async def test_artist_list_paginates(client, make_artist):
    for _ in range(5):
        await make_artist()

    response = await client.get("/api/v1/artists", params={"page": 2, "limit": 2})

    body = response.json()
    assert len(body["data"]) == 2
    assert body["pagination"] == {"page": 2, "limit": 2, "total": 5, "total_pages": 3}


# =============================================================================
# MUSICS
# =============================================================================

async def test_music_crud(client, editor_token, owned_artist):
    artist = owned_artist
    headers = auth_header(editor_token)

    created = await client.post("/api/v1/musics", json=music_payload(artist.id), headers=headers)
    assert created.status_code == 201
    music = created.json()["data"]
    assert music["play_count"] == 0
    assert music["like_count"] == 0

    updated = await client.put(
        f"/api/v1/musics/{music['id']}", json={"duration": "1:02:03"}, headers=headers
    )
    assert updated.json()["data"]["duration"] == "1:02:03"

    listing = await client.get("/api/v1/musics", params={"artist_id": artist.id, "genre": "rock"})
    assert listing.json()["pagination"]["total"] == 1

    assert (await client.delete(f"/api/v1/musics/{music['id']}", headers=headers)).status_code == 200
    assert (await client.get(f"/api/v1/musics/{music['id']}")).status_code == 404


async def test_music_for_unknown_artist_is_404(client, editor_token):
    response = await client.post("/api/v1/musics", json=music_payload(9999), headers=auth_header(editor_token))

    assert response.status_code == 404


async def test_music_duration_is_validated(client, editor_token, owned_artist):
    artist = owned_artist

    response = await client.post(
        "/api/v1/musics", json=music_payload(artist.id, duration="3 minutes"), headers=auth_header(editor_token)
    )

    assert response.status_code == 422


async def test_premium_listener_cannot_create_music(client, make_user, make_artist):
    artist = await make_artist()
    _, token = await make_user(role=Role.PREMIUM)

    response = await client.post("/api/v1/musics", json=music_payload(artist.id), headers=auth_header(token))

    assert response.status_code == 403


async def test_play_counter_increments(client, editor_token, owned_artist):
    artist = owned_artist
    music_id = (
        await client.post("/api/v1/musics", json=music_payload(artist.id), headers=auth_header(editor_token))
    ).json()["data"]["id"]

    counts = [
        (await client.post(f"/api/v1/musics/{music_id}/play")).json()["data"]["play_count"]
        for _ in range(3)
    ]

    assert counts == [1, 2, 3]
    assert (await client.get(f"/api/v1/musics/{music_id}")).json()["data"]["play_count"] == 3


async def test_play_unknown_music_is_404(client):
    assert (await client.post("/api/v1/musics/9999/play")).status_code == 404


async def test_like_and_unlike(client, editor_token, make_user, owned_artist):
    artist = owned_artist
    music_id = (
        await client.post("/api/v1/musics", json=music_payload(artist.id), headers=auth_header(editor_token))
    ).json()["data"]["id"]
    _, fan_token = await make_user(role=Role.USER)
    headers = auth_header(fan_token)

    liked = await client.post(f"/api/v1/musics/{music_id}/like", headers=headers)
    assert liked.status_code == 200
    assert liked.json()["data"] == {"music_id": music_id, "like_count": 1, "liked": True}

    assert (await client.post(f"/api/v1/musics/{music_id}/like", headers=headers)).status_code == 409

    unliked = await client.delete(f"/api/v1/musics/{music_id}/like", headers=headers)
    assert unliked.json()["data"]["like_count"] == 0

    again = await client.delete(f"/api/v1/musics/{music_id}/like", headers=headers)
    assert again.status_code == 400


async def test_like_requires_credentials(client):
    assert (await client.post("/api/v1/musics/1/like")).status_code == 401


# =============================================================================
# ARTIST OWNERSHIP
# =============================================================================

async def test_label_creating_artist_manages_it(client, editor):
    user, token = editor

    response = await client.post(
        "/api/v1/artists", json={"name": "Mine", "email": "mine@example.com"}, headers=auth_header(token)
    )

    assert response.status_code == 201
    assert response.json()["data"]["ref_user_id"] == user.id


async def test_label_cannot_touch_another_labels_artist(client, make_user, owned_artist, editor):
    owner, _ = editor
    rival, rival_token = await make_user(role=Role.LABEL)
    headers = auth_header(rival_token)

    takeover = await client.put(
        f"/api/v1/artists/{owned_artist.id}", json={"ref_user_id": rival.id}, headers=headers
    )
    renamed = await client.put(f"/api/v1/artists/{owned_artist.id}", json={"name": "Stolen"}, headers=headers)
    deleted = await client.delete(f"/api/v1/artists/{owned_artist.id}", headers=headers)

    assert [takeover.status_code, renamed.status_code, deleted.status_code] == [403, 403, 403]
    assert takeover.json()["error"]["details"]["reason"] == "not_owner"

    current = (await client.get(f"/api/v1/artists/{owned_artist.id}")).json()["data"]
    assert current["ref_user_id"] == owner.id
    assert current["name"] == "The Cave"


async def test_label_cannot_hand_artist_to_another_account(client, make_user, editor_token, owned_artist):
    other, _ = await make_user(role=Role.LABEL)

    response = await client.put(
        f"/api/v1/artists/{owned_artist.id}", json={"ref_user_id": other.id}, headers=auth_header(editor_token)
    )

    assert response.status_code == 403


async def test_label_cannot_create_artist_for_another_account(client, make_user, editor_token):
    other, _ = await make_user(role=Role.LABEL)

    response = await client.post(
        "/api/v1/artists",
        json={"name": "Theirs", "email": "theirs@example.com", "ref_user_id": other.id},
        headers=auth_header(editor_token),
    )

    assert response.status_code == 403


async def test_admin_reassigns_artist_manager(client, make_user, owned_artist):
    _, admin_token = await make_user(role=Role.ADMIN)
    successor, _ = await make_user(role=Role.LABEL)

    response = await client.put(
        f"/api/v1/artists/{owned_artist.id}", json={"ref_user_id": successor.id}, headers=auth_header(admin_token)
    )

    assert response.status_code == 200
    assert response.json()["data"]["ref_user_id"] == successor.id


async def test_unknown_manager_account_is_404(client, make_user, owned_artist):
    _, admin_token = await make_user(role=Role.ADMIN)
    headers = auth_header(admin_token)

    created = await client.post(
        "/api/v1/artists", json={"name": "Ghost", "email": "ghost@example.com", "ref_user_id": 99999}, headers=headers
    )
    updated = await client.put(f"/api/v1/artists/{owned_artist.id}", json={"ref_user_id": 99999}, headers=headers)

    assert created.status_code == 404
    assert created.json()["error"]["details"]["resource_type"] == "user"
    assert updated.status_code == 404
    assert (await client.get("/api/v1/artists", params={"search": "ghost"})).json()["pagination"]["total"] == 0


async def test_artist_repository_reports_broken_manager_link_as_conflict(db_session):
    with pytest.raises(ConflictError):
        await ArtistRepositoryImpl(db_session).create(
            Artist(name="Orphan", email="orphan@example.com", ref_user_id=99999)
        )


async def test_artist_list_counts_followers(client, make_user, make_artist):
    popular = await make_artist()
    niche = await make_artist()
    quiet = await make_artist()
    _, first_fan = await make_user(role=Role.USER)
    _, second_fan = await make_user(role=Role.USER)

    for token, artist in ((first_fan, popular), (second_fan, popular), (first_fan, niche)):
        assert (await client.post(f"/api/v1/artists/{artist.id}/follow", headers=auth_header(token))).status_code == 200

    listing = (await client.get("/api/v1/artists")).json()["data"]

    counts = {item["id"]: item["total_follower"] for item in listing}
    assert counts == {popular.id: 2, niche.id: 1, quiet.id: 0}


# =============================================================================
# TRACK OWNERSHIP
# =============================================================================

async def test_independent_cannot_change_another_accounts_track(client, make_user, make_artist):
    owner, owner_token = await make_user(role=Role.INDEPENDENT)
    artist = await make_artist(ref_user_id=owner.id)
    music_id = (
        await client.post("/api/v1/musics", json=music_payload(artist.id), headers=auth_header(owner_token))
    ).json()["data"]["id"]
    _, intruder_token = await make_user(role=Role.INDEPENDENT)
    headers = auth_header(intruder_token)

    updated = await client.put(f"/api/v1/musics/{music_id}", json={"title": "hijacked"}, headers=headers)
    deleted = await client.delete(f"/api/v1/musics/{music_id}", headers=headers)

    assert updated.status_code == 403
    assert updated.json()["error"]["details"]["reason"] == "not_owner"
    assert deleted.status_code == 403
    assert (await client.get(f"/api/v1/musics/{music_id}")).json()["data"]["title"] == "Gua Hantu"


async def test_cannot_publish_under_unmanaged_artist(client, make_user, make_artist):
    artist = await make_artist()
    _, token = await make_user(role=Role.INDEPENDENT)

    response = await client.post("/api/v1/musics", json=music_payload(artist.id), headers=auth_header(token))

    assert response.status_code == 403


async def test_cannot_move_track_to_unmanaged_artist(client, editor_token, owned_artist, make_artist):
    elsewhere = await make_artist()
    headers = auth_header(editor_token)
    music_id = (
        await client.post("/api/v1/musics", json=music_payload(owned_artist.id), headers=headers)
    ).json()["data"]["id"]

    response = await client.put(f"/api/v1/musics/{music_id}", json={"artist_id": elsewhere.id}, headers=headers)

    assert response.status_code == 403


async def test_admin_manages_any_track(client, make_user, editor_token, owned_artist):
    music_id = (
        await client.post("/api/v1/musics", json=music_payload(owned_artist.id), headers=auth_header(editor_token))
    ).json()["data"]["id"]
    _, admin_token = await make_user(role=Role.ADMIN)

    updated = await client.put(
        f"/api/v1/musics/{music_id}", json={"title": "Remastered"}, headers=auth_header(admin_token)
    )
    deleted = await client.delete(f"/api/v1/musics/{music_id}", headers=auth_header(admin_token))

    assert updated.json()["data"]["title"] == "Remastered"
    assert deleted.status_code == 200

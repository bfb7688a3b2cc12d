"""
Playlist and playlist song endpoint tests.
"""

import pytest
from conftest import auth_header

from soundcave.shared.core.roles import Role


@pytest.fixture
async def tracks(client, make_user, make_artist):
    """Three published tracks, created by an admin."""
    artist = await make_artist(name="The Cave")
    _, admin_token = await make_user(role=Role.ADMIN)

    created = []
    for title in ("Gua Hantu", "Stalagmite", "Echo Chamber"):
        response = await client.post(
            "/api/v1/musics",
            json={
                "title": title,
                "artist": "The Cave",
                "artist_id": artist.id,
                "genre": "Rock",
                "release_date": "2025-03-01",
                "duration": "03:45",
                "language": "Indonesian",
                "audio_file_url": f"https://storage.example.com/soundcave/musics/{title}.mp3",
            },
            headers=auth_header(admin_token),
        )
        created.append(response.json()["data"])
    return created


@pytest.fixture
async def listener(make_user):
    return await make_user(role=Role.USER)


async def create_playlist(client, token, **overrides):
    payload = {"name": "Late Night", "description": "Quiet songs"}
    payload.update(overrides)
    response = await client.post("/api/v1/playlists", json=payload, headers=auth_header(token))
    assert response.status_code == 201
    return response.json()["data"]


# =============================================================================
# PLAYLISTS
# =============================================================================

async def test_playlist_crud(client, listener):
    user, token = listener
    headers = auth_header(token)

    playlist = await create_playlist(client, token)
    assert playlist["user_id"] == user.id
    assert playlist["is_public"] is True
    assert playlist["song_count"] == 0

    updated = await client.put(
        f"/api/v1/playlists/{playlist['id']}", json={"name": "Early Morning"}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["name"] == "Early Morning"
    assert updated.json()["data"]["description"] == "Quiet songs"

    deleted = await client.delete(f"/api/v1/playlists/{playlist['id']}", headers=headers)
    assert deleted.status_code == 200
    assert (await client.get(f"/api/v1/playlists/{playlist['id']}", headers=headers)).status_code == 404


async def test_playlists_require_credentials(client):
    assert (await client.get("/api/v1/playlists")).status_code == 401
    assert (await client.post("/api/v1/playlists", json={"name": "Nope"})).status_code == 401


async def test_private_playlist_is_hidden_from_others(client, make_user, listener):
    _, owner_token = listener
    _, other_token = await make_user(role=Role.PREMIUM)
    _, admin_token = await make_user(role=Role.ADMIN)
    private = await create_playlist(client, owner_token, name="Diary", is_public=False)
    await create_playlist(client, owner_token, name="Party")

    hidden = await client.get(f"/api/v1/playlists/{private['id']}", headers=auth_header(other_token))
    others_view = await client.get("/api/v1/playlists", headers=auth_header(other_token))
    owners_view = await client.get(f"/api/v1/playlists/{private['id']}", headers=auth_header(owner_token))
    admins_view = await client.get(f"/api/v1/playlists/{private['id']}", headers=auth_header(admin_token))

    assert hidden.status_code == 404
    assert [p["name"] for p in others_view.json()["data"]] == ["Party"]
    assert owners_view.status_code == 200
    assert admins_view.status_code == 200


async def test_list_only_mine(client, make_user, listener):
    _, owner_token = listener
    _, other_token = await make_user(role=Role.USER)
    await create_playlist(client, owner_token, name="Mine")
    await create_playlist(client, other_token, name="Theirs")

    response = await client.get("/api/v1/playlists", params={"mine": "true"}, headers=auth_header(owner_token))

    assert [p["name"] for p in response.json()["data"]] == ["Mine"]
    assert response.json()["pagination"]["total"] == 1


async def test_non_owner_cannot_change_public_playlist(client, make_user, listener):
    _, owner_token = listener
    _, other_token = await make_user(role=Role.USER)
    playlist = await create_playlist(client, owner_token)
    headers = auth_header(other_token)

    renamed = await client.put(f"/api/v1/playlists/{playlist['id']}", json={"name": "Mine now"}, headers=headers)
    deleted = await client.delete(f"/api/v1/playlists/{playlist['id']}", headers=headers)

    assert [renamed.status_code, deleted.status_code] == [403, 403]
    assert renamed.json()["error"]["details"]["reason"] == "not_owner"


# =============================================================================
# PLAYLIST SONGS
# =============================================================================

async def test_songs_are_appended_in_order(client, listener, tracks):
    _, token = listener
    headers = auth_header(token)
    playlist = await create_playlist(client, token)
    url = f"/api/v1/playlists/{playlist['id']}/songs"

    first = await client.post(url, json={"music_id": tracks[0]["id"]}, headers=headers)
    second = await client.post(url, json={"music_id": tracks[1]["id"]}, headers=headers)

    assert first.status_code == 201
    assert [first.json()["data"]["position"], second.json()["data"]["position"]] == [0, 1]
    assert second.json()["data"]["title"] == "Stalagmite"

    songs = (await client.get(url, headers=headers)).json()["data"]
    assert [s["music_id"] for s in songs] == [tracks[0]["id"], tracks[1]["id"]]

    fetched = await client.get(f"/api/v1/playlists/{playlist['id']}", headers=headers)
    assert fetched.json()["data"]["song_count"] == 2


async def test_duplicate_song_is_conflict(client, listener, tracks):
    _, token = listener
    headers = auth_header(token)
    playlist = await create_playlist(client, token)
    url = f"/api/v1/playlists/{playlist['id']}/songs"

    await client.post(url, json={"music_id": tracks[0]["id"]}, headers=headers)
    again = await client.post(url, json={"music_id": tracks[0]["id"]}, headers=headers)

    assert again.status_code == 409
    assert len((await client.get(url, headers=headers)).json()["data"]) == 1


async def test_unknown_music_is_404(client, listener):
    _, token = listener
    playlist = await create_playlist(client, token)

    response = await client.post(
        f"/api/v1/playlists/{playlist['id']}/songs", json={"music_id": 9999}, headers=auth_header(token)
    )

    assert response.status_code == 404
    assert response.json()["error"]["details"]["resource_type"] == "music"


async def test_moving_song_changes_order(client, listener, tracks):
    _, token = listener
    headers = auth_header(token)
    playlist = await create_playlist(client, token)
    url = f"/api/v1/playlists/{playlist['id']}/songs"
    for track in tracks:
        await client.post(url, json={"music_id": track["id"]}, headers=headers)

    moved = await client.put(f"{url}/{tracks[0]['id']}", json={"position": 5}, headers=headers)

    assert moved.status_code == 200
    assert moved.json()["data"]["position"] == 5
    songs = (await client.get(url, headers=headers)).json()["data"]
    assert [s["music_id"] for s in songs] == [tracks[1]["id"], tracks[2]["id"], tracks[0]["id"]]


async def test_remove_song(client, listener, tracks):
    _, token = listener
    headers = auth_header(token)
    playlist = await create_playlist(client, token)
    url = f"/api/v1/playlists/{playlist['id']}/songs"
    await client.post(url, json={"music_id": tracks[0]["id"]}, headers=headers)

    removed = await client.delete(f"{url}/{tracks[0]['id']}", headers=headers)
    missing = await client.delete(f"{url}/{tracks[0]['id']}", headers=headers)

    assert removed.status_code == 200
    assert missing.status_code == 404
    assert missing.json()["error"]["details"]["resource_type"] == "playlist_song"
    assert (await client.get(url, headers=headers)).json()["data"] == []


async def test_non_owner_cannot_add_songs(client, make_user, listener, tracks):
    _, owner_token = listener
    _, other_token = await make_user(role=Role.USER)
    playlist = await create_playlist(client, owner_token)

    response = await client.post(
        f"/api/v1/playlists/{playlist['id']}/songs",
        json={"music_id": tracks[0]["id"]},
        headers=auth_header(other_token),
    )

    assert response.status_code == 403

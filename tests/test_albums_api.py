"""
Album endpoint tests.
"""

import pytest
from conftest import auth_header

from soundcave.shared.core.roles import Role


def album_payload(artist_id: int, **overrides):
    payload = {
        "title": "Stalactites",
        "artist_id": artist_id,
        "artist": "The Cave",
        "release_date": "2025-03-01",
        "album_type": "album",
        "genre": "Rock",
        "total_tracks": 9,
        "record_label": "Deep Records",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
async def editor(make_user):
    return await make_user(role=Role.LABEL)


@pytest.fixture
async def owned_artist(editor, make_artist):
    user, _ = editor
    return await make_artist(name="The Cave", ref_user_id=user.id)


async def test_album_crud(client, editor, owned_artist):
    _, token = editor
    headers = auth_header(token)

    created = await client.post("/api/v1/albums", json=album_payload(owned_artist.id), headers=headers)
    assert created.status_code == 201
    album = created.json()["data"]
    assert album["album_type"] == "album"
    assert album["total_tracks"] == 9

    fetched = await client.get(f"/api/v1/albums/{album['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["release_date"] == "2025-03-01"

    updated = await client.put(
        f"/api/v1/albums/{album['id']}", json={"album_type": "EP", "total_tracks": 5}, headers=headers
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["album_type"] == "EP"
    assert updated.json()["data"]["title"] == "Stalactites"

    deleted = await client.delete(f"/api/v1/albums/{album['id']}", headers=headers)
    assert deleted.status_code == 200
    assert (await client.get(f"/api/v1/albums/{album['id']}")).status_code == 404


async def test_album_list_filters(client, editor, owned_artist):
    headers = auth_header(editor[1])
    await client.post("/api/v1/albums", json=album_payload(owned_artist.id), headers=headers)
    await client.post(
        "/api/v1/albums",
        json=album_payload(owned_artist.id, title="Drip", album_type="single", total_tracks=1),
        headers=headers,
    )

    singles = await client.get("/api/v1/albums", params={"album_type": "single"})
    searched = await client.get("/api/v1/albums", params={"search": "stalac"})
    by_artist = await client.get("/api/v1/albums", params={"artist_id": owned_artist.id})

    assert [a["title"] for a in singles.json()["data"]] == ["Drip"]
    assert [a["title"] for a in searched.json()["data"]] == ["Stalactites"]
    assert by_artist.json()["pagination"]["total"] == 2


async def test_album_for_unknown_artist_is_404(client, editor):
    response = await client.post("/api/v1/albums", json=album_payload(9999), headers=auth_header(editor[1]))

    assert response.status_code == 404
    assert response.json()["error"]["details"]["resource_type"] == "artist"


async def test_album_type_is_validated(client, editor, owned_artist):
    response = await client.post(
        "/api/v1/albums", json=album_payload(owned_artist.id, album_type="mixtape"), headers=auth_header(editor[1])
    )

    assert response.status_code == 422


async def test_label_cannot_change_another_labels_album(client, make_user, editor, owned_artist):
    created = await client.post(
        "/api/v1/albums", json=album_payload(owned_artist.id), headers=auth_header(editor[1])
    )
    album_id = created.json()["data"]["id"]
    _, rival_token = await make_user(role=Role.LABEL)
    headers = auth_header(rival_token)

    renamed = await client.put(f"/api/v1/albums/{album_id}", json={"title": "Stolen"}, headers=headers)
    deleted = await client.delete(f"/api/v1/albums/{album_id}", headers=headers)

    assert [renamed.status_code, deleted.status_code] == [403, 403]
    assert renamed.json()["error"]["details"]["reason"] == "not_owner"
    assert (await client.get(f"/api/v1/albums/{album_id}")).json()["data"]["title"] == "Stalactites"


async def test_cannot_release_album_under_unmanaged_artist(client, make_user, make_artist):
    artist = await make_artist(name="Somebody Else")
    _, token = await make_user(role=Role.INDEPENDENT)

    response = await client.post("/api/v1/albums", json=album_payload(artist.id), headers=auth_header(token))

    assert response.status_code == 403


async def test_admin_manages_any_album(client, make_user, editor, owned_artist):
    created = await client.post(
        "/api/v1/albums", json=album_payload(owned_artist.id), headers=auth_header(editor[1])
    )
    _, admin_token = await make_user(role=Role.ADMIN)

    response = await client.put(
        f"/api/v1/albums/{created.json()['data']['id']}",
        json={"record_label": "Admin Records"},
        headers=auth_header(admin_token),
    )

    assert response.status_code == 200
    assert response.json()["data"]["record_label"] == "Admin Records"


async def test_listener_cannot_create_album(client, make_user, make_artist):
    artist = await make_artist()
    _, token = await make_user(role=Role.USER)

    response = await client.post("/api/v1/albums", json=album_payload(artist.id), headers=auth_header(token))

    assert response.status_code == 403

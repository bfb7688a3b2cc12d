"""
Image and audio upload endpoint tests against the in-memory storage fake.
"""

from conftest import auth_header, png_bytes

from soundcave.modules.media.infrastructure.database.image_repository_impl import ImageRepositoryImpl
from soundcave.shared.core.dependencies import get_optional_storage_client, get_storage_client
from soundcave.shared.core.roles import Role


async def test_upload_list_and_delete_image(client, storage, make_user):
    _, admin_token = await make_user(role=Role.ADMIN)
    data = png_bytes()

    uploaded = await client.post(
        "/api/v1/images/upload",
        files={"file": ("cover.png", data, "image/png")},
        data={"folder": "covers"},
        headers=auth_header(admin_token),
    )

    assert uploaded.status_code == 201
    image = uploaded.json()["data"]
    assert image["bucket_path"].startswith("covers/")
    assert image["bucket_path"].endswith(".png")
    assert image["file_size"] == len(data)
    assert storage.objects[image["bucket_path"]] == data

    listing = await client.get("/api/v1/images", headers=auth_header(admin_token))
    assert listing.json()["pagination"]["total"] == 1

    deleted = await client.delete(f"/api/v1/images/{image['id']}", headers=auth_header(admin_token))
    assert deleted.status_code == 200
    assert storage.deleted == [image["bucket_path"]]

    listing = await client.get("/api/v1/images", headers=auth_header(admin_token))
    assert listing.json()["pagination"]["total"] == 0


async def test_image_type_is_checked(client, make_user):
    _, token = await make_user()

    response = await client.post(
        "/api/v1/images/upload",
        files={"file": ("notes.txt", b"hello", "text/plain")},
        headers=auth_header(token),
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_FILE_TYPE"


async def test_image_content_must_match_declared_type(client, make_user):
    _, token = await make_user()

    fake = await client.post(
        "/api/v1/images/upload",
        files={"file": ("fake.png", b"definitely not a png", "image/png")},
        headers=auth_header(token),
    )
    mismatched = await client.post(
        "/api/v1/images/upload",
        files={"file": ("photo.jpg", png_bytes(), "image/jpeg")},
        headers=auth_header(token),
    )

    assert fake.status_code == 400
    assert mismatched.status_code == 400


async def test_folder_cannot_escape(client, make_user):
    _, token = await make_user()

    response = await client.post(
        "/api/v1/images/upload",
        files={"file": ("cover.png", png_bytes(), "image/png")},
        data={"folder": "../secrets"},
        headers=auth_header(token),
    )

    assert response.status_code == 422


async def test_only_admin_deletes_images(client, make_user):
    _, token = await make_user(role=Role.LABEL)

    assert (await client.delete("/api/v1/images/1", headers=auth_header(token))).status_code == 403


async def test_upload_without_storage_is_unavailable(app, client, make_user):
    app.dependency_overrides.pop(get_storage_client)
    app.dependency_overrides.pop(get_optional_storage_client)
    _, token = await make_user()

    response = await client.post(
        "/api/v1/images/upload",
        files={"file": ("cover.png", png_bytes(), "image/png")},
        headers=auth_header(token),
    )

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "FILE_STORAGE_ERROR"


async def test_failed_record_removes_stored_image(client, storage, make_user, monkeypatch):
    async def refuse(self, image):
        raise RuntimeError("images table unavailable")

    monkeypatch.setattr(ImageRepositoryImpl, "create", refuse)
    _, token = await make_user()

    response = await client.post(
        "/api/v1/images/upload",
        files={"file": ("cover.png", png_bytes(), "image/png")},
        headers=auth_header(token),
    )

    assert response.status_code == 500
    assert storage.objects == {}
    assert len(storage.deleted) == 1
    assert storage.deleted[0].endswith(".png")


async def test_upload_multiple_reports_rejected_files(client, storage, make_user):
    _, token = await make_user()

    response = await client.post(
        "/api/v1/images/upload-multiple",
        files=[
            ("file", ("one.png", png_bytes(), "image/png")),
            ("file", ("notes.txt", b"hello", "text/plain")),
            ("file", ("two.png", png_bytes(color=(0, 90, 200)), "image/png")),
        ],
        data={"folder": "covers"},
        headers=auth_header(token),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "2 of 3 images uploaded"
    assert [image["file_name"] for image in body["data"]] == ["one.png", "two.png"]
    assert all(image["bucket_path"].startswith("covers/") for image in body["data"])
    assert body["errors"] == [
        {"file_name": "notes.txt", "code": "INVALID_FILE_TYPE", "message": body["errors"][0]["message"]}
    ]
    assert len(storage.objects) == 2


async def test_upload_multiple_rejects_bad_folder_before_storing(client, storage, make_user):
    _, token = await make_user()

    response = await client.post(
        "/api/v1/images/upload-multiple",
        files=[("file", ("one.png", png_bytes(), "image/png"))],
        data={"folder": "../outside"},
        headers=auth_header(token),
    )

    assert response.status_code == 422
    assert storage.objects == {}


# =============================================================================
# AUDIO
# =============================================================================

async def test_audio_upload_returns_public_url(client, storage, make_user):
    _, token = await make_user(role=Role.INDEPENDENT)

    response = await client.post(
        "/api/v1/musics/upload",
        files={"file": ("track.mp3", b"ID3" + b"\x00" * 64, "audio/mpeg")},
        headers=auth_header(token),
    )

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["bucket_path"].startswith("musics/")
    assert data["file_url"].endswith(data["bucket_path"])
    assert data["bucket_path"] in storage.objects


async def test_audio_size_limit(client, make_user):
    _, token = await make_user(role=Role.LABEL)

    response = await client.post(
        "/api/v1/musics/upload",
        files={"file": ("long.mp3", b"\x00" * (5 * 1024 * 1024 + 1), "audio/mpeg")},
        headers=auth_header(token),
    )

    assert response.status_code == 413


async def test_listener_cannot_upload_audio(client, make_user):
    _, token = await make_user(role=Role.USER)

    response = await client.post(
        "/api/v1/musics/upload",
        files={"file": ("track.mp3", b"ID3", "audio/mpeg")},
        headers=auth_header(token),
    )

    assert response.status_code == 403

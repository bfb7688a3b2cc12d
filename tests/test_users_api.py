"""
Admin account management and self-service profile updates.
"""

from conftest import auth_header

from soundcave.shared.core.roles import Role


async def test_admin_creates_premium_account(client, make_user):
    _, admin_token = await make_user(role=Role.ADMIN)

    response = await client.post(
        "/api/v1/users",
        json={"full_name": "Putri", "email": "putri@example.com", "password": "secret123", "role": "premium"},
        headers=auth_header(admin_token),
    )

    assert response.status_code == 201
    assert response.json()["data"]["role"] == "premium"


async def test_admin_cannot_create_label_account(client, make_user):
    _, admin_token = await make_user(role=Role.ADMIN)

    response = await client.post(
        "/api/v1/users",
        json={"full_name": "Label", "email": "label@example.com", "password": "secret123", "role": "label"},
        headers=auth_header(admin_token),
    )

    assert response.status_code == 422


async def test_list_filters_by_role_and_search(client, make_user):
    _, admin_token = await make_user(role=Role.ADMIN)
    await make_user(role=Role.PREMIUM, full_name="Rina Premium")
    await make_user(role=Role.PREMIUM, full_name="Bayu Premium")
    await make_user(role=Role.USER, full_name="Rina Listener")
    headers = auth_header(admin_token)

    by_role = await client.get("/api/v1/users", params={"role": "premium"}, headers=headers)
    by_search = await client.get("/api/v1/users", params={"search": "rina"}, headers=headers)
    both = await client.get("/api/v1/users", params={"role": "premium", "search": "rina"}, headers=headers)

    assert by_role.json()["pagination"]["total"] == 2
    assert by_search.json()["pagination"]["total"] == 2
    assert [user["full_name"] for user in both.json()["data"]] == ["Rina Premium"]


async def test_user_updates_own_profile(client, make_user):
    user, token = await make_user(full_name="Old Name")

    response = await client.put(
        f"/api/v1/users/{user.id}", json={"full_name": "New Name", "location": "Bandung"}, headers=auth_header(token)
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["full_name"] == "New Name"
    assert data["location"] == "Bandung"
    assert data["email"] == user.email


async def test_user_cannot_update_someone_else(client, make_user):
    _, token = await make_user()
    other, _ = await make_user()

    response = await client.put(f"/api/v1/users/{other.id}", json={"bio": "hacked"}, headers=auth_header(token))

    assert response.status_code == 403


async def test_user_cannot_promote_self(client, make_user):
    user, token = await make_user()

    response = await client.put(f"/api/v1/users/{user.id}", json={"role": "admin"}, headers=auth_header(token))

    assert response.status_code == 403


async def test_admin_changes_role(client, make_user):
    _, admin_token = await make_user(role=Role.ADMIN)
    user, _ = await make_user()

    response = await client.put(
        f"/api/v1/users/{user.id}", json={"role": "premium"}, headers=auth_header(admin_token)
    )

    assert response.json()["data"]["role"] == "premium"


async def test_admin_deletes_account(client, make_user):
    _, admin_token = await make_user(role=Role.ADMIN)
    user, _ = await make_user()
    headers = auth_header(admin_token)

    assert (await client.delete(f"/api/v1/users/{user.id}", headers=headers)).status_code == 200
    assert (await client.get(f"/api/v1/users/{user.id}", headers=headers)).status_code == 404
    assert (await client.delete(f"/api/v1/users/{user.id}", headers=headers)).status_code == 404

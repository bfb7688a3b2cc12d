"""
Follow relationship tests: the HTTP flows for user and artist targets, the
rule checks, and concurrent follows against the same target.
"""

import asyncio

import pytest
from conftest import auth_header
from sqlalchemy import func, select

from soundcave.modules.catalog.infrastructure.database.artist_repository_impl import ArtistRepositoryImpl
from soundcave.modules.social.domain.models.follow import FollowTargetType
from soundcave.modules.social.domain.services.follow_service import FollowService
from soundcave.modules.social.infrastructure.database.follow_repository_impl import FollowRepositoryImpl
from soundcave.modules.social.infrastructure.database.models import FollowModel
from soundcave.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from soundcave.shared.core.exceptions import AuthorizationError
from soundcave.shared.core.roles import Role
from soundcave.shared.core.security import Identity


async def _edge_count(app, target_type: str, target_id: int) -> int:
    async with app.state.database.session_factory() as session:
        return await session.scalar(
            select(func.count()).select_from(FollowModel).where(
                FollowModel.target_type == target_type,
                FollowModel.target_id == target_id,
            )
        )


# =============================================================================
# USER TARGETS
# =============================================================================

async def test_follow_unfollow_cycle(app, client, make_user):
    _, fan_token = await make_user(role=Role.USER, user_id=42)
    await make_user(role=Role.INDEPENDENT, user_id=7, full_name="Indie Seven")
    headers = auth_header(fan_token)

    followed = await client.post("/api/v1/users/follow", json={"target_user_id": 7}, headers=headers)
    assert followed.status_code == 200
    assert followed.json()["data"] == {"target_user_id": 7, "target_name": "Indie Seven", "total_follower": 1}

    again = await client.post("/api/v1/users/follow", json={"target_user_id": 7}, headers=headers)
    assert again.status_code == 409
    assert await _edge_count(app, "user", 7) == 1

    unfollowed = await client.post("/api/v1/users/unfollow", json={"target_user_id": 7}, headers=headers)
    assert unfollowed.status_code == 200
    assert unfollowed.json()["data"]["total_follower"] == 0

    again = await client.post("/api/v1/users/unfollow", json={"target_user_id": 7}, headers=headers)
    assert again.status_code == 400
    assert again.json()["error"]["code"] == "INVALID_STATE"
    assert await _edge_count(app, "user", 7) == 0


async def test_self_follow_is_conflict(client, make_user):
    fan, token = await make_user(role=Role.USER)

    response = await client.post(
        "/api/v1/users/follow", json={"target_user_id": fan.id}, headers=auth_header(token)
    )

    assert response.status_code == 409


async def test_listener_account_cannot_be_followed(app, client, make_user):
    _, token = await make_user(role=Role.USER)
    other, _ = await make_user(role=Role.PREMIUM)

    response = await client.post(
        "/api/v1/users/follow", json={"target_user_id": other.id}, headers=auth_header(token)
    )

    assert response.status_code == 422
    assert response.json()["error"]["details"]["target_role"] == "premium"
    assert await _edge_count(app, "user", other.id) == 0


async def test_only_listeners_may_follow(client, make_user):
    _, label_token = await make_user(role=Role.LABEL)
    target, _ = await make_user(role=Role.INDEPENDENT)

    response = await client.post(
        "/api/v1/users/follow", json={"target_user_id": target.id}, headers=auth_header(label_token)
    )

    assert response.status_code == 403


async def test_only_listeners_may_unfollow(client, make_user, make_artist):
    _, premium_token = await make_user(role=Role.PREMIUM)
    target, _ = await make_user(role=Role.INDEPENDENT)
    artist = await make_artist()
    headers = auth_header(premium_token)

    from_user = await client.post("/api/v1/users/unfollow", json={"target_user_id": target.id}, headers=headers)
    from_artist = await client.post(f"/api/v1/artists/{artist.id}/unfollow", headers=headers)

    assert from_user.status_code == 403
    assert from_artist.status_code == 403
    assert from_user.json()["error"]["code"] == "FORBIDDEN"


async def test_missing_target_is_404(client, make_user):
    _, token = await make_user(role=Role.USER)

    response = await client.post(
        "/api/v1/users/follow", json={"target_user_id": 9999}, headers=auth_header(token)
    )

    assert response.status_code == 404


async def test_follow_requires_credentials(client):
    response = await client.post("/api/v1/users/follow", json={"target_user_id": 7})

    assert response.status_code == 401


async def test_follower_count_endpoint(client, make_user):
    label, _ = await make_user(role=Role.LABEL)
    for _ in range(3):
        _, token = await make_user(role=Role.USER)
        await client.post("/api/v1/users/follow", json={"target_user_id": label.id}, headers=auth_header(token))

    response = await client.get(f"/api/v1/users/{label.id}/followers/count", headers=auth_header(token))

    assert response.status_code == 200
    assert response.json()["data"]["total_follower"] == 3


# =============================================================================
# ARTIST TARGETS
# =============================================================================

async def test_artist_follow_cycle(client, make_user, make_artist):
    _, token = await make_user(role=Role.USER)
    artist = await make_artist(name="The Cave")
    headers = auth_header(token)

    followed = await client.post(f"/api/v1/artists/{artist.id}/follow", headers=headers)
    assert followed.status_code == 200
    assert followed.json()["data"] == {"artist_id": artist.id, "target_name": "The Cave", "total_follower": 1}

    detail = await client.get(f"/api/v1/artists/{artist.id}")
    assert detail.json()["data"]["total_follower"] == 1

    assert (await client.post(f"/api/v1/artists/{artist.id}/follow", headers=headers)).status_code == 409

    unfollowed = await client.post(f"/api/v1/artists/{artist.id}/unfollow", headers=headers)
    assert unfollowed.json()["data"]["total_follower"] == 0

    count = await client.get(f"/api/v1/artists/{artist.id}/followers/count")
    assert count.json()["data"]["total_follower"] == 0


async def test_cannot_follow_own_artist_page(client, make_user, make_artist):
    fan, token = await make_user(role=Role.USER)
    artist = await make_artist(ref_user_id=fan.id)

    response = await client.post(f"/api/v1/artists/{artist.id}/follow", headers=auth_header(token))

    assert response.status_code == 409


async def test_unfollowing_unfollowed_artist_is_invalid_state(app, client, make_user, make_artist):
    _, token = await make_user(role=Role.USER)
    artist = await make_artist()

    response = await client.post(f"/api/v1/artists/{artist.id}/unfollow", headers=auth_header(token))

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_STATE"
    assert await _edge_count(app, "artist", artist.id) == 0


async def test_deleted_artist_cannot_be_followed(client, make_user, make_artist):
    _, admin_token = await make_user(role=Role.ADMIN)
    _, token = await make_user(role=Role.USER)
    artist = await make_artist()

    assert (await client.delete(f"/api/v1/artists/{artist.id}", headers=auth_header(admin_token))).status_code == 200

    response = await client.post(f"/api/v1/artists/{artist.id}/follow", headers=auth_header(token))
    assert response.status_code == 404


# =============================================================================
# SERVICE LEVEL
# =============================================================================

def _service(session) -> FollowService:
    return FollowService(
        session=session,
        follow_repository=FollowRepositoryImpl(session),
        user_repository=UserRepositoryImpl(session),
        artist_repository=ArtistRepositoryImpl(session),
    )


async def test_service_rejects_non_listener_before_touching_storage(db_session, make_user):
    target, _ = await make_user(role=Role.INDEPENDENT)
    admin = Identity(id=999, email="admin@example.com", role=Role.ADMIN)

    with pytest.raises(AuthorizationError):
        await _service(db_session).follow(admin, FollowTargetType.USER, target.id)


async def test_concurrent_follows_count_every_fan(app, make_user):
    target, _ = await make_user(role=Role.INDEPENDENT)
    fans = [await make_user(role=Role.USER) for _ in range(2)]

    async def follow_as(fan):
        async with app.state.database.session_factory() as session:
            identity = Identity(id=fan.id, email=fan.email, role=fan.role)
            return await _service(session).follow(identity, FollowTargetType.USER, target.id)

    results = await asyncio.gather(*(follow_as(fan) for fan, _ in fans))

    assert max(result.follower_count for result in results) == 2
    assert await _edge_count(app, "user", target.id) == 2

    async with app.state.database.session_factory() as session:
        assert await _service(session).is_following(fans[0][0].id, FollowTargetType.USER, target.id)


async def test_follower_counts_for_many_targets(db_session, make_user):
    first, second, silent = [(await make_user(role=Role.LABEL))[0] for _ in range(3)]
    fans = [(await make_user(role=Role.USER))[0] for _ in range(2)]
    repository = FollowRepositoryImpl(db_session)
    for fan in fans:
        await repository.add(fan.id, FollowTargetType.USER, first.id)
    await repository.add(fans[0].id, FollowTargetType.USER, second.id)
    await repository.add(fans[0].id, FollowTargetType.ARTIST, silent.id)

    counts = await repository.count_followers_for(FollowTargetType.USER, [first.id, second.id, silent.id])

    assert counts == {first.id: 2, second.id: 1}
    assert await repository.count_followers_for(FollowTargetType.USER, []) == {}

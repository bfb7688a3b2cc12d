"""
Liveness, readiness and root information endpoints.
"""


async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "soundcave-api"


async def test_readiness_reports_components(client):
    response = await client.get("/health/ready")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["components"] == {"database": "healthy", "storage": "not_configured"}


async def test_root_info(client):
    body = (await client.get("/")).json()

    assert body["api_base"] == "/api/v1"
    assert body["environment"] == "test"

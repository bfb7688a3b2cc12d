"""
Error envelope and request id behaviour of the middleware stack.
"""

from soundcave.shared.core.exceptions import ConflictError


async def test_unexpected_error_is_opaque(app, client):
    @app.get("/boom")
    async def boom():
        raise RuntimeError("secret detail")

    response = await client.get("/boom")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert "secret detail" not in response.text
    assert error["details"]["correlation_id"] == response.headers["X-Request-ID"]
    assert error["request_id"] == response.headers["X-Request-ID"]


async def test_unknown_route_uses_envelope(client):
    response = await client.get("/api/v1/nowhere")

    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["details"]["path"] == "/api/v1/nowhere"
    assert error["timestamp"]


async def test_validation_errors_list_fields(client):
    response = await client.post("/api/v1/auth/login", json={"email": "not-an-email"})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    fields = {item["field"] for item in error["details"]["validation_errors"]}
    assert "body.email" in fields
    assert "body.password" in fields


async def test_supplied_request_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


async def test_error_carries_request_id(client):
    response = await client.get("/api/v1/profile", headers={"X-Request-ID": "req-456"})

    assert response.status_code == 401
    assert response.json()["error"]["request_id"] == "req-456"


def test_exception_to_dict():
    error = ConflictError("Already following this account", resource_type="follow")

    assert error.to_dict()["error"]["code"] == "CONFLICT"
    assert error.to_dict()["error"]["status_code"] == 409

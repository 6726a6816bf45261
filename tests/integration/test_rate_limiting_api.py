import pytest
from fastapi.testclient import TestClient

from storefront_api.infrastructure.entrypoints.api.app_factory import create_app


@pytest.fixture
def limited_client(settings):
    limited = settings.model_copy(update={"rate_limit_auth_max": 2, "rate_limit_general_max": 100})
    return TestClient(create_app(limited))


def test_headers_are_reported(limited_client):
    response = limited_client.get("/health")

    assert response.headers["RateLimit-Limit"] == "100"
    assert response.headers["RateLimit-Remaining"] == "99"


def test_auth_attempts_are_limited(limited_client):
    payload = {"email": "someone@example.com", "password": "Whatever1!"}
    for _ in range(2):
        assert limited_client.post("/auth/login", json=payload).status_code == 401

    response = limited_client.post("/auth/login", json=payload)

    assert response.status_code == 429
    body = response.json()
    assert body["message"] == "Too many authentication attempts"
    assert response.headers["RateLimit-Remaining"] == "0"
    assert int(response.headers["Retry-After"]) > 0


def test_disabled_limiter(settings):
    client = TestClient(
        create_app(settings.model_copy(update={"rate_limit_enabled": False, "rate_limit_auth_max": 1}))
    )
    payload = {"email": "someone@example.com", "password": "Whatever1!"}

    for _ in range(3):
        assert client.post("/auth/login", json=payload).status_code == 401

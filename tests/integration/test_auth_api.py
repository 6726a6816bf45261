USER_PASSWORD = "UserPass1!"


def test_register_returns_public_fields(client):
    response = client.post(
        "/auth/register",
        json={"username": "shopper", "email": " Shopper@Example.com ", "password": USER_PASSWORD},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User registered successfully"
    assert body["errors"] is None
    assert body["object"]["email"] == "shopper@example.com"
    assert "password" not in body["object"]
    assert "passwordHash" not in body["object"]


def test_register_rejects_duplicates(client, register):
    register()

    response = client.post(
        "/auth/register",
        json={"username": "other", "email": "shopper@example.com", "password": USER_PASSWORD},
    )

    assert response.status_code == 400
    assert response.json()["errors"] == ["The email is already registered"]


def test_register_requires_all_fields(client):
    response = client.post("/auth/register", json={"username": "shopper"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Registration failed"
    assert body["object"] is None


def test_login_returns_token_and_profile(client, register):
    register()

    response = client.post(
        "/auth/login", json={"email": "shopper@example.com", "password": USER_PASSWORD}
    )

    assert response.status_code == 200
    body = response.json()["object"]
    assert body["token"]
    assert body["user"]["role"] == "user"


def test_login_with_wrong_password(client, register):
    register()

    response = client.post(
        "/auth/login", json={"email": "shopper@example.com", "password": "WrongPass1!"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_protected_route_without_token(client):
    response = client.get("/orders")

    assert response.status_code == 401
    assert response.json()["errors"] == ["Authentication token is required"]


def test_protected_route_with_garbage_token(client):
    response = client.get("/orders", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == 401
    assert response.json()["errors"] == ["Invalid or expired authentication token"]


def test_admin_route_for_regular_user(client, user_headers):
    response = client.post(
        "/products",
        json={"name": "x", "description": "y", "price": 1, "stock": 1, "category": "z"},
        headers=user_headers,
    )

    assert response.status_code == 403
    assert response.json()["message"] == "Access forbidden"

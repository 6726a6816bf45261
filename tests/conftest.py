import io
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from storefront_api.core.domain.catalog import Product
from storefront_api.infrastructure.configuration.main_settings import Settings
from storefront_api.infrastructure.entrypoints.api.app_factory import create_app
from storefront_api.infrastructure.persistence.memory import (
    MemoryOrderRepository,
    MemoryProductRepository,
    MemoryStore,
    MemoryUnitOfWork,
    MemoryUserRepository,
)
from storefront_api.infrastructure.security import BcryptPasswordHasher

TEST_SECRET = "test-secret-that-is-definitely-longer-than-32-chars"
ADMIN_PASSWORD = "AdminPass1!"
USER_PASSWORD = "UserPass1!"


@pytest.fixture
def image_bytes():
    def _make(fmt: str = "PNG", size: tuple[int, int] = (640, 480), color="red") -> bytes:
        output = io.BytesIO()
        Image.new("RGB", size, color).save(output, fmt)
        return output.getvalue()

    return _make


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def settings(upload_dir):
    return Settings(
        _env_file=None,
        app_name="Storefront Test",
        app_env="test",
        storage_backend="memory",
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        upload_dir=upload_dir,
        base_url="http://testserver",
    )


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def users(store):
    return MemoryUserRepository(store)


@pytest.fixture
def products(store):
    return MemoryProductRepository(store)


@pytest.fixture
def orders(store):
    return MemoryOrderRepository(store)


@pytest.fixture
def unit_of_work(store):
    return MemoryUnitOfWork(store)


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def make_product(products):
    def _make(**overrides) -> Product:
        fields = {
            "name": "Wireless Mouse",
            "description": "Ergonomic wireless mouse",
            "price": 25.5,
            "stock": 10,
            "category": "electronics",
        }
        fields.update(overrides)
        return products.add(Product(**fields))

    return _make


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def container(app):
    return app.state.container


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def register(client):
    def _register(username="shopper", email="shopper@example.com", password=USER_PASSWORD):
        response = client.post(
            "/auth/register", json={"username": username, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        return response.json()["object"]

    return _register


@pytest.fixture
def login(client):
    def _login(email="shopper@example.com", password=USER_PASSWORD) -> dict[str, str]:
        response = client.post("/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['object']['token']}"}

    return _login


@pytest.fixture
def user_headers(register, login):
    register()
    return login()


@pytest.fixture
def admin_headers(register, login, container):
    register(username="admin", email="admin@example.com", password=ADMIN_PASSWORD)
    container.promote_user().execute("admin@example.com")
    return login(email="admin@example.com", password=ADMIN_PASSWORD)


@pytest.fixture
def create_product(client, admin_headers):
    def _create(**overrides) -> dict:
        payload = {
            "name": "Mechanical Keyboard",
            "description": "Hot-swappable mechanical keyboard",
            "price": 89.99,
            "stock": 5,
            "category": "electronics",
        }
        payload.update(overrides)
        response = client.post("/products", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["object"]

    return _create

import pytest

from storefront_api.core.application.exceptions import NotFoundError, ValidationError
from storefront_api.core.application.usecases.favorites import ManageFavoritesUseCase
from storefront_api.core.domain.identity import User


@pytest.fixture
def user(users):
    return users.add(User(username="fan", email="fan@example.com", password_hash="x"))


@pytest.fixture
def favorites(users, products):
    return ManageFavoritesUseCase(users, products)


def test_add_list_remove(favorites, user, make_product):
    product = make_product()

    favorites.add(user.id, product.id)
    assert [p.id for p in favorites.list(user.id)] == [product.id]

    favorites.remove(user.id, product.id)
    assert favorites.list(user.id) == []


def test_adding_twice_fails(favorites, user, make_product):
    product = make_product()
    favorites.add(user.id, product.id)

    with pytest.raises(ValidationError) as exc:
        favorites.add(user.id, product.id)
    assert exc.value.message == "Failed to add to favorites"
    assert exc.value.errors == ["Product may already be in favorites"]


def test_adding_unknown_product_fails(favorites, user):
    with pytest.raises(NotFoundError):
        favorites.add(user.id, "ghost")


def test_removing_absent_favorite_fails(favorites, user):
    with pytest.raises(ValidationError) as exc:
        favorites.remove(user.id, "ghost")
    assert exc.value.errors == ["Product may not be in favorites"]


def test_deleted_products_are_skipped(favorites, user, products, make_product):
    kept = make_product(name="Kept")
    gone = make_product(name="Gone")
    favorites.add(user.id, kept.id)
    favorites.add(user.id, gone.id)

    products.delete(gone.id)

    assert [p.name for p in favorites.list(user.id)] == ["Kept"]

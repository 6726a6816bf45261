import pytest

from storefront_api.core.application.exceptions import DuplicateKeyError
from storefront_api.core.domain.catalog import Product
from storefront_api.core.domain.identity import User, UserRole
from storefront_api.core.domain.ordering import Order, OrderLine


def test_repositories_hand_out_copies(products, make_product):
    product = make_product(stock=3)

    fetched = products.find_by_id(product.id)
    fetched.stock = 0

    assert products.find_by_id(product.id).stock == 3


def test_unique_email_and_username(users):
    users.add(User(username="ana", email="ana@example.com", password_hash="x"))

    with pytest.raises(DuplicateKeyError) as exc:
        users.add(User(username="other", email="ana@example.com", password_hash="x"))
    assert exc.value.field == "email"

    with pytest.raises(DuplicateKeyError) as exc:
        users.add(User(username="ana", email="new@example.com", password_hash="x"))
    assert exc.value.field == "username"


def test_update_role_and_favorites(users):
    user = users.add(User(username="ana", email="ana@example.com", password_hash="x"))

    assert users.update_role(user.id, UserRole.ADMIN)
    assert users.add_favorite(user.id, "p1")
    assert not users.add_favorite(user.id, "p1")
    assert users.list_favorites(user.id) == ["p1"]
    assert users.find_by_id(user.id).is_admin
    assert not users.update_role("ghost", UserRole.ADMIN)


def test_decrement_stock_is_guarded(products, make_product):
    product = make_product(stock=2)

    assert products.decrement_stock(product.id, 2)
    assert not products.decrement_stock(product.id, 1)
    assert not products.decrement_stock("ghost", 1)
    assert products.find_by_id(product.id).stock == 0


def test_update_rejects_unknown_fields(products, make_product):
    product = make_product()
    with pytest.raises(ValueError):
        products.update(product.id, {"colour": "red"})
    assert products.update("ghost", {"price": 1}) is None


def test_unit_of_work_restores_state_on_failure(unit_of_work, products, orders, make_product):
    product = make_product(stock=5)

    def work(tx):
        tx.products.decrement_stock(product.id, 5)
        tx.orders.add(
            Order.place("u1", [OrderLine(product.id, "n", "d", quantity=5, price=1.0)])
        )
        raise RuntimeError("crash before commit")

    with pytest.raises(RuntimeError):
        unit_of_work.run(work)

    assert products.find_by_id(product.id).stock == 5
    assert orders.list_by_user("u1") == []


def test_unit_of_work_returns_result(unit_of_work, products):
    result = unit_of_work.run(lambda tx: tx.products.add(Product("n", "d", 1.0, 1, "c")))
    assert products.find_by_id(result.id) is not None

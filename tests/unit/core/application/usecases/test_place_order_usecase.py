from unittest.mock import MagicMock

import pytest

from storefront_api.core.application.exceptions import (
    InsufficientStockError,
    NotFoundError,
    StockUpdateError,
    ValidationError,
)
from storefront_api.core.application.usecases.ordering import (
    ListUserOrdersUseCase,
    PlaceOrderUseCase,
)
from storefront_api.core.domain.ordering import OrderStatus
from storefront_api.infrastructure.persistence.memory.memory_unit_of_work import (
    MemoryTransactionContext,
)


@pytest.fixture
def place(unit_of_work):
    return PlaceOrderUseCase(unit_of_work)


def test_places_order_and_decrements_stock(place, products, orders, make_product):
    mouse = make_product(name="Mouse", price=10.1, stock=5)
    pad = make_product(name="Pad", price=3.35, stock=2)

    order = place.execute(
        "user-1",
        [{"productId": mouse.id, "quantity": 3}, {"productId": pad.id, "quantity": 2}],
    )

    assert order.status == OrderStatus.PENDING
    assert order.total_price == 37.0
    assert order.description == "Order with 2 products"
    assert [line.item_total for line in order.lines] == [30.3, 6.7]
    assert products.find_by_id(mouse.id).stock == 2
    assert products.find_by_id(pad.id).stock == 0
    assert orders.find_by_id(order.id).user_id == "user-1"


def test_price_comes_from_stored_product(place, make_product):
    product = make_product(price=99.99, stock=1)
    order = place.execute("user-1", [{"productId": product.id, "quantity": 1, "price": 0.01}])
    assert order.total_price == 99.99
    assert order.description == "Order with 1 product"


def test_insufficient_stock_changes_nothing(place, products, orders, make_product):
    plenty = make_product(name="Plenty", stock=10)
    scarce = make_product(name="Scarce", stock=1)

    with pytest.raises(InsufficientStockError) as exc:
        place.execute(
            "user-1",
            [{"productId": plenty.id, "quantity": 2}, {"productId": scarce.id, "quantity": 2}],
        )

    assert exc.value.errors == ["Insufficient stock for Scarce. Available: 1, Requested: 2"]
    assert products.find_by_id(plenty.id).stock == 10
    assert orders.list_by_user("user-1") == []


def test_repeated_product_quantities_are_summed(place, make_product):
    product = make_product(name="Cable", stock=3)
    with pytest.raises(InsufficientStockError) as exc:
        place.execute(
            "user-1",
            [{"productId": product.id, "quantity": 2}, {"productId": product.id, "quantity": 2}],
        )
    assert "Requested: 4" in exc.value.errors[0]


def test_unknown_product(place):
    with pytest.raises(NotFoundError) as exc:
        place.execute("user-1", [{"productId": "ghost", "quantity": 1}])
    assert exc.value.errors == ["Product with ID ghost does not exist"]


def test_malformed_body(place):
    with pytest.raises(ValidationError) as exc:
        place.execute("user-1", {"productId": "x"})
    assert exc.value.message == "Order placement failed"

    with pytest.raises(ValidationError) as exc:
        place.execute("user-1", [{"productId": "x", "quantity": 0}])
    assert exc.value.message == "Order validation failed"


def test_failed_decrement_rolls_back_earlier_writes(store, make_product, orders):
    first = make_product(name="First", stock=5)
    second = make_product(name="Second", stock=5)

    real_context = MemoryTransactionContext(store)
    products = MagicMock(wraps=real_context.products)
    def decrement(product_id, quantity):
        if product_id == second.id:
            return False
        return real_context.products.decrement_stock(product_id, quantity)

    products.decrement_stock.side_effect = decrement
    context = MagicMock(products=products, orders=real_context.orders)

    def run(work):
        snapshot = store.snapshot()
        try:
            return work(context)
        except Exception:
            store.restore(snapshot)
            raise

    unit_of_work = MagicMock()
    unit_of_work.run.side_effect = run

    with pytest.raises(StockUpdateError) as exc:
        PlaceOrderUseCase(unit_of_work).execute(
            "user-1",
            [{"productId": first.id, "quantity": 1}, {"productId": second.id, "quantity": 1}],
        )

    assert exc.value.errors == ["Failed to update stock for Second"]
    assert store.products[first.id].stock == 5
    assert orders.list_by_user("user-1") == []


def test_list_user_orders_newest_first(place, orders, make_product):
    product = make_product(stock=10)
    first = place.execute("user-1", [{"productId": product.id, "quantity": 1}])
    second = place.execute("user-1", [{"productId": product.id, "quantity": 1}])
    place.execute("user-2", [{"productId": product.id, "quantity": 1}])

    listed = ListUserOrdersUseCase(orders).execute("user-1")

    assert {order.id for order in listed} == {first.id, second.id}
    assert listed[0].created_at >= listed[1].created_at

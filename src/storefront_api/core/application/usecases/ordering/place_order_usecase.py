from typing import Any

from storefront_api.core.application.exceptions import (
    InsufficientStockError,
    NotFoundError,
    StockUpdateError,
    ValidationError,
)
from storefront_api.core.application.ports import TransactionContext, UnitOfWorkPort
from storefront_api.core.application.validation import parse_order_items
from storefront_api.core.domain.catalog import Product
from storefront_api.core.domain.ordering import Order, OrderItemRequest, OrderLine
from storefront_api.infrastructure.observability.logger_factory_service import (
    LoggerFactoryService,
)

logger = LoggerFactoryService.build_logger(__name__)


class PlaceOrderUseCase:
    """Checks stock, decrements it and records the order as one transaction.

    Prices come from the stored products, never from the request. Quantities
    for a product listed more than once are summed before the stock check.
    """

    def __init__(self, unit_of_work: UnitOfWorkPort):
        self.unit_of_work = unit_of_work

    def execute(self, user_id: str, raw_items: Any) -> Order:
        if not isinstance(raw_items, list) or not raw_items:
            raise ValidationError(
                "Order placement failed",
                ["Order must contain an array of products with productId and quantity"],
            )
        items, errors = parse_order_items(raw_items)
        if errors:
            raise ValidationError("Order validation failed", errors)

        order = self.unit_of_work.run(lambda tx: self._place(tx, user_id, items))
        logger.info(f"Order {order.id} placed by {user_id} for {order.total_price}")
        return order

    def _place(
        self, tx: TransactionContext, user_id: str, items: list[OrderItemRequest]
    ) -> Order:
        products: dict[str, Product] = {}
        requested: dict[str, int] = {}

        for item in items:
            product = products.get(item.product_id) or tx.products.find_by_id(item.product_id)
            if product is None:
                raise NotFoundError(
                    "Product not found", [f"Product with ID {item.product_id} does not exist"]
                )
            products[product.id] = product
            requested[product.id] = requested.get(product.id, 0) + item.quantity
            if not product.has_stock_for(requested[product.id]):
                raise InsufficientStockError(
                    "Insufficient stock",
                    [
                        f"Insufficient stock for {product.name}. "
                        f"Available: {product.stock}, Requested: {requested[product.id]}"
                    ],
                )

        lines = [
            OrderLine(
                product_id=item.product_id,
                name=products[item.product_id].name,
                description=products[item.product_id].description,
                quantity=item.quantity,
                price=products[item.product_id].price,
            )
            for item in items
        ]

        for product_id, quantity in requested.items():
            if not tx.products.decrement_stock(product_id, quantity):
                raise StockUpdateError(
                    "Stock update failed",
                    [f"Failed to update stock for {products[product_id].name}"],
                )

        return tx.orders.add(Order.place(user_id, lines))

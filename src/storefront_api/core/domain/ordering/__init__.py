from storefront_api.core.domain.ordering.order import Order, OrderLine, round_price
from storefront_api.core.domain.ordering.order_item_request import OrderItemRequest
from storefront_api.core.domain.ordering.order_status import OrderStatus

__all__ = ["Order", "OrderItemRequest", "OrderLine", "OrderStatus", "round_price"]

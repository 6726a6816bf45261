from storefront_api.core.application.usecases.ordering.list_user_orders_usecase import ListUserOrdersUseCase
from storefront_api.core.application.usecases.ordering.place_order_usecase import PlaceOrderUseCase

__all__ = ["ListUserOrdersUseCase", "PlaceOrderUseCase"]

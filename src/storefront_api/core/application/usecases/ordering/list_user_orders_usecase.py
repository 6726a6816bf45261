from storefront_api.core.application.ports import OrderRepositoryPort
from storefront_api.core.domain.ordering import Order


class ListUserOrdersUseCase:
    def __init__(self, orders: OrderRepositoryPort):
        self.orders = orders

    def execute(self, user_id: str) -> list[Order]:
        return self.orders.list_by_user(user_id)
